"""
Synchronous Kafka producer with acknowledged, one-at-a-time delivery.
"""

import logging
from typing import Any, Dict, Optional

from confluent_kafka import Producer, KafkaException

from kafkawrite.exceptions import ProducerConnectError
from .config import KafkaConfig

logger = logging.getLogger(__name__)


class KafkaProducer:
    """Synchronous Kafka producer: every send blocks until acknowledged or timed out."""

    def __init__(self, config: Optional[KafkaConfig] = None):
        """
        Initialize Kafka producer.

        Args:
            config: Kafka configuration, uses default if None
        """
        self.config = config or KafkaConfig()
        self._producer = None
        self._error_count = 0
        self._success_count = 0

    @property
    def connected(self) -> bool:
        return self._producer is not None

    def connect(self) -> None:
        """
        Create the underlying producer and verify the broker is reachable.

        Raises:
            ProducerConnectError: If the configuration is rejected or the
                broker does not answer a metadata request in time
        """
        if self._producer is not None:
            logger.warning("Producer already connected")
            return

        try:
            producer = Producer(self.config.get_producer_config())
            # Constructing the client does not touch the network; a metadata
            # request is the first real round trip to the broker.
            producer.list_topics(timeout=self.config.connect_timeout)
        except (KafkaException, ValueError, TypeError) as e:
            logger.error(f"Failed to connect to Kafka at {self.config.bootstrap_servers}: {e}")
            raise ProducerConnectError(
                f"Could not connect to Kafka at {self.config.bootstrap_servers}: {e}"
            ) from e

        self._producer = producer
        logger.info(f"Connected to Kafka broker: {self.config.bootstrap_servers}")

    def send_message(self, topic: str, value: bytes) -> bool:
        """
        Send a message with no key and no headers and wait for its delivery report.

        Args:
            topic: Kafka topic name
            value: Serialized message value

        Returns:
            True if the broker acknowledged the message, False otherwise

        Raises:
            ProducerConnectError: If called before connect()
        """
        if self._producer is None:
            raise ProducerConnectError("Producer is not connected")

        delivery_report = {"delivered": False, "error": None}

        def delivery_callback(err, msg):
            """Callback for delivery reports."""
            if err is not None:
                delivery_report["error"] = str(err)
            else:
                delivery_report["delivered"] = True
                logger.debug(f"Message delivered to {msg.topic()} [{msg.partition()}] @ {msg.offset()}")

        try:
            self._producer.produce(topic=topic, value=value, callback=delivery_callback)

            # Blocks until the delivery report arrives or the timeout elapses
            remaining = self._producer.flush(timeout=self.config.send_timeout)
        except (KafkaException, BufferError) as e:
            logger.error(f"Kafka exception while sending to '{topic}': {e}")
            self._error_count += 1
            return False

        if delivery_report["delivered"]:
            # remaining may still count earlier messages that timed out
            self._success_count += 1
            return True

        if delivery_report["error"] is None and remaining > 0:
            logger.error(f"Message to '{topic}' not delivered within {self.config.send_timeout}s")
        else:
            logger.error(f"Message delivery to '{topic}' failed: {delivery_report['error']}")
        self._error_count += 1
        return False

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get producer metrics.

        Returns:
            Dictionary containing producer metrics
        """
        attempted = self._success_count + self._error_count
        return {
            "messages_sent": self._success_count,
            "messages_failed": self._error_count,
            "success_rate": self._success_count / attempted if attempted > 0 else 0,
        }

    def close(self) -> None:
        """Flush outstanding messages and release the producer."""
        if self._producer is not None:
            remaining = self._producer.flush(timeout=self.config.send_timeout)
            if remaining > 0:
                logger.warning(f"Closed producer with {remaining} messages still in queue")

            self._producer = None
            logger.info(f"Kafka producer closed. Sent: {self._success_count}, Failed: {self._error_count}")

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

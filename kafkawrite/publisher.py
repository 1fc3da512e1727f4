"""
Publishes a batch of source records to a Kafka topic, one synchronous send per record.
"""

import logging
from typing import Callable, List, Optional

from kafkawrite.codec import decode_records, encode_record
from kafkawrite.exceptions import ProducerConnectError, RecordDecodeError, RecordEncodeError
from kafkawrite.kafka import KafkaConfig, KafkaProducer
from kafkawrite.models import DeliveryOutcome, PublishResult, PublishStatus, Record

logger = logging.getLogger(__name__)

ProducerFactory = Callable[[KafkaConfig], KafkaProducer]


class RecordPublisher:
    """
    Decodes raw source bytes and publishes each record to Kafka.

    Decode and connect failures abort the whole run and are reported through
    the returned PublishResult. Encode and send failures only affect the
    record they happen on.
    """

    def __init__(
        self,
        config: Optional[KafkaConfig] = None,
        producer_factory: Optional[ProducerFactory] = None,
    ):
        """
        Initialize the publisher.

        Args:
            config: Base Kafka configuration; bootstrap_servers is replaced
                by the host given to publish()
            producer_factory: Builds a producer from a config, defaults to KafkaProducer
        """
        self.config = config or KafkaConfig()
        self.producer_factory = producer_factory or KafkaProducer

    def publish(self, raw: bytes, host: str, topic: str) -> PublishResult:
        """
        Publish every record in raw to topic on the broker at host.

        Args:
            raw: JSON array of records as returned by the source
            host: Broker address (host:port)
            topic: Destination topic

        Returns:
            PublishResult with sent/total counts and the run status
        """
        try:
            records = decode_records(raw)
        except RecordDecodeError as e:
            logger.error(f"Failed to decode source data: {e}")
            return PublishResult(status=PublishStatus.DECODE_FAILED, error=str(e))

        config = self.config.model_copy(update={"bootstrap_servers": host})
        producer = self.producer_factory(config)
        try:
            try:
                producer.connect()
            except ProducerConnectError as e:
                logger.error(f"Aborting publish of {len(records)} records: {e}")
                return PublishResult(
                    total=len(records),
                    status=PublishStatus.CONNECT_FAILED,
                    error=str(e),
                )

            outcomes = self._send_records(producer, records, topic)
        finally:
            producer.close()

        sent = sum(1 for outcome in outcomes if outcome is DeliveryOutcome.DELIVERED)
        result = PublishResult(sent=sent, total=len(records), outcomes=outcomes)
        logger.info(f"Publish to '{topic}' complete: {result.sent} sent, {result.failed} failed")
        return result

    def _send_records(
        self,
        producer: KafkaProducer,
        records: List[Record],
        topic: str,
    ) -> List[DeliveryOutcome]:
        outcomes = []
        for record in records:
            try:
                payload = encode_record(record)
            except RecordEncodeError as e:
                logger.error(str(e))
                outcomes.append(DeliveryOutcome.ENCODE_FAILED)
                continue

            if producer.send_message(topic, payload):
                outcomes.append(DeliveryOutcome.DELIVERED)
            else:
                logger.error(f"Failed to send record {record.id} to '{topic}'")
                outcomes.append(DeliveryOutcome.SEND_FAILED)
        return outcomes


def publish(raw: bytes, host: str, topic: str, config: Optional[KafkaConfig] = None) -> PublishResult:
    """Convenience wrapper around RecordPublisher.publish."""
    return RecordPublisher(config).publish(raw, host, topic)

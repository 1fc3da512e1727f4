"""
Kafka producer configuration settings.
"""

from typing import Any, Dict
from pydantic import Field
from pydantic_settings import BaseSettings


class KafkaConfig(BaseSettings):
    """Immutable configuration for the synchronous Kafka producer."""

    # Connection settings
    bootstrap_servers: str = Field(
        default="localhost:9092",
        description="Kafka broker address (host:port)"
    )

    # Delivery guarantees
    acks: str = Field(
        default="all",
        description="Required acknowledgments; 'all' waits for every in-sync replica"
    )
    partitioner: str = Field(
        default="murmur2_random",
        description="Hash-based partitioner; unkeyed messages take its no-key path"
    )
    broker_version_fallback: str = Field(
        default="1.0.0",
        description="Lowest broker protocol version assumed when version probing fails"
    )

    # Timeouts
    send_timeout: float = Field(
        default=15.0,
        description="Upper bound in seconds for delivering a single message"
    )
    connect_timeout: float = Field(
        default=10.0,
        description="Upper bound in seconds for the initial broker metadata request"
    )

    model_config = {
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "KAFKA_",
        "extra": "ignore",
        "frozen": True,
    }

    def get_producer_config(self) -> Dict[str, Any]:
        """
        Build the librdkafka configuration for the producer.

        Returns:
            Complete producer configuration dict
        """
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "partitioner": self.partitioner,
            "api.version.request": True,
            "broker.version.fallback": self.broker_version_fallback,
            "message.timeout.ms": int(self.send_timeout * 1000),
            "compression.type": "none",
            "retries": 0,  # Failed sends are counted, never retried
        }

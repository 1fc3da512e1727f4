"""Custom exceptions for the kafkawrite package."""

from typing import Optional


class KafkaWriteError(Exception):
    """Base class for all kafkawrite errors."""

    pass


class SourceFetchError(KafkaWriteError):
    """Raised when the upstream source cannot be read."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RecordDecodeError(KafkaWriteError):
    """Raised when the raw source bytes are not a valid record batch."""

    pass


class RecordEncodeError(KafkaWriteError):
    """Raised when a single record cannot be serialized."""

    pass


class ProducerConnectError(KafkaWriteError):
    """Raised when the Kafka producer cannot reach the broker."""

    pass

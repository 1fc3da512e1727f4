"""
Fetch GitHub issues and write them to a Kafka topic as JSON events.
"""

from kafkawrite.models import DeliveryOutcome, PublishResult, PublishStatus, Record
from kafkawrite.publisher import RecordPublisher, publish
from kafkawrite.source import SourceReader, fetch

__all__ = [
    "DeliveryOutcome",
    "PublishResult",
    "PublishStatus",
    "Record",
    "RecordPublisher",
    "SourceReader",
    "fetch",
    "publish",
]

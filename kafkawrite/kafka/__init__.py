"""
Kafka module for synchronous message publishing.
"""

from .config import KafkaConfig
from .producer import KafkaProducer

__all__ = [
    "KafkaConfig",
    "KafkaProducer",
]

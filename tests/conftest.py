"""
Shared pytest fixtures and configuration for all tests.
"""

import orjson
import pytest

from kafkawrite.kafka import KafkaConfig
from tests.utils.mocks import FakeProducerFactory, MockConfluentProducer


# ============= Source Data Fixtures =============


@pytest.fixture
def github_issues():
    """Issues as the GitHub API returns them, including fields that get dropped."""
    return [
        {
            "url": "https://api.github.com/repos/elastic/beats/issues/101",
            "id": 1001,
            "number": 101,
            "title": "Filebeat drops lines on rotation",
            "state": "open",
            "body": "Steps to reproduce...",
            "user": {"login": "octocat", "id": 1},
            "labels": [{"name": "bug"}],
        },
        {
            "url": "https://api.github.com/repos/elastic/beats/issues/102",
            "id": 1002,
            "number": 102,
            "title": "Add metricset for redis",
            "state": "closed",
            "body": None,
            "user": {"login": "hubot", "id": 2},
            "labels": [],
        },
        {
            "url": "https://api.github.com/repos/elastic/beats/issues/103",
            "id": 1003,
            "number": 103,
            "title": "Docs: unicode ✓ in titles",
            "state": "open",
            "body": "Body with \"quotes\" and\nnewlines",
            "labels": [],
        },
    ]


@pytest.fixture
def github_issues_raw(github_issues):
    """Raw response body for the github_issues fixture."""
    return orjson.dumps(github_issues)


# ============= Kafka Fixtures =============


@pytest.fixture
def kafka_config():
    """Kafka configuration pointing at a test broker."""
    return KafkaConfig(bootstrap_servers="test-kafka:9092")


@pytest.fixture
def mock_confluent_producer():
    """Mock confluent producer that accepts every message."""
    return MockConfluentProducer()


@pytest.fixture
def fake_producer_factory():
    """Factory building fake producers that accept every send."""
    return FakeProducerFactory()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from leaking in through the environment."""
    for name in (
        "KAFKA_BOOTSTRAP_SERVERS",
        "KAFKA_ACKS",
        "KAFKA_PARTITIONER",
        "KAFKA_BROKER_VERSION_FALLBACK",
        "KAFKA_SEND_TIMEOUT",
        "KAFKA_CONNECT_TIMEOUT",
        "SOURCE_URL",
        "SOURCE_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


# ============= Pytest Configuration =============


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (no external dependencies)")
    config.addinivalue_line("markers", "integration: mark test as integration test (requires services)")

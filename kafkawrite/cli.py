"""
Command-line entry point.

Fetches issues from the upstream source and writes each one to a Kafka topic.

Usage:
    kafkawrite --host kafkahost:9092 --topic mytopic
"""

import argparse
import logging
import sys
from typing import List, Optional

from kafkawrite.exceptions import SourceFetchError
from kafkawrite.publisher import RecordPublisher
from kafkawrite.source import SourceReader

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kafkawrite",
        description="Write moderately-interesting JSON data to a Kafka topic",
    )
    parser.add_argument("--host", required=True, help="Kafka broker address (host:port)")
    parser.add_argument("--topic", required=True, help="Kafka topic")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse accepts --host "" as present
    if not args.host or not args.topic:
        parser.error("Host and topic must be provided.")
    return args


def run(
    host: str,
    topic: str,
    reader: Optional[SourceReader] = None,
    publisher: Optional[RecordPublisher] = None,
) -> int:
    """
    Fetch once, publish the batch and print the summary.

    Returns:
        Process exit code
    """
    reader = reader or SourceReader()
    publisher = publisher or RecordPublisher()

    try:
        data = reader.fetch()
    except SourceFetchError as e:
        logger.error(f"Fetch failed: {e}")
        return 1

    result = publisher.publish(data, host, topic)
    if result.aborted:
        logger.error(f"Publish aborted ({result.status.value}): {result.error}")
        return 1

    print(result.summary())
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, args.log_level))
    sys.exit(run(args.host, args.topic))


if __name__ == "__main__":
    main()

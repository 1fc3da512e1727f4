"""
JSON encoding and decoding of source records.
"""

import logging
from typing import List

import orjson
from pydantic import TypeAdapter, ValidationError

from kafkawrite.exceptions import RecordDecodeError, RecordEncodeError
from kafkawrite.models import Record

logger = logging.getLogger(__name__)

_batch_adapter = TypeAdapter(List[Record])


def decode_records(raw: bytes) -> List[Record]:
    """
    Decode a raw JSON array into an ordered list of records.

    Args:
        raw: Response body from the source

    Returns:
        Records in source order

    Raises:
        RecordDecodeError: If the bytes are not valid JSON or any element
            does not have the record shape
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise RecordDecodeError(f"Invalid JSON in source data: {e}") from e

    if data is None:
        # A null document is an empty batch
        data = []

    if not isinstance(data, list):
        raise RecordDecodeError(f"Expected a JSON array of records, got {type(data).__name__}")

    try:
        records = _batch_adapter.validate_python(data)
    except ValidationError as e:
        raise RecordDecodeError(f"Source data does not match record shape: {e}") from e

    logger.debug(f"Decoded {len(records)} records from {len(raw)} bytes")
    return records


def encode_record(record: Record) -> bytes:
    """
    Serialize one record back to its JSON form.

    Raises:
        RecordEncodeError: If serialization fails
    """
    try:
        return orjson.dumps(record.model_dump(mode="json"))
    except (orjson.JSONEncodeError, TypeError, ValueError) as e:
        raise RecordEncodeError(f"Failed to encode record {record.id}: {e}") from e

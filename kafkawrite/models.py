"""
Data models for source records and publish results.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Record(BaseModel):
    """A single GitHub issue, reduced to the fields that get published."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: int = Field(default=0, description="Issue identifier")
    title: str = Field(default="", description="Issue title")
    state: str = Field(default="", description="Issue state, e.g. 'open' or 'closed'")
    body: str = Field(default="", description="Free-text issue body")

    @model_validator(mode="before")
    @classmethod
    def null_record_to_empty(cls, value):
        return {} if value is None else value

    @field_validator("id", mode="before")
    @classmethod
    def null_id_to_zero(cls, value):
        return 0 if value is None else value

    @field_validator("title", "state", "body", mode="before")
    @classmethod
    def null_text_to_empty(cls, value):
        # GitHub sends null for issues without a body
        return "" if value is None else value


class DeliveryOutcome(str, Enum):
    """Result of handling one record in the publish loop."""

    DELIVERED = "delivered"
    ENCODE_FAILED = "failed-to-encode"
    SEND_FAILED = "failed-to-send"


class PublishStatus(str, Enum):
    """How a publish run ended."""

    COMPLETED = "completed"
    DECODE_FAILED = "decode-failed"
    CONNECT_FAILED = "connect-failed"


class PublishResult(BaseModel):
    """Outcome of publishing one record batch."""

    model_config = ConfigDict(frozen=True)

    sent: int = Field(default=0, description="Records delivered and acknowledged")
    total: int = Field(default=0, description="Records decoded from the source")
    status: PublishStatus = Field(default=PublishStatus.COMPLETED, description="How the run ended")
    error: Optional[str] = Field(default=None, description="Reason for a global abort")
    outcomes: List[DeliveryOutcome] = Field(
        default_factory=list,
        description="Per-record outcomes in batch order",
    )

    @property
    def aborted(self) -> bool:
        """True if decoding or connecting failed and nothing was attempted."""
        return self.status is not PublishStatus.COMPLETED

    @property
    def failed(self) -> int:
        return self.total - self.sent

    def summary(self) -> str:
        return f"{self.sent} / {self.total} messages sent"

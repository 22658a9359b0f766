"""
Base model classes for ResumeCraft records.

Provides common fields and functionality shared across all models.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin(BaseModel):
    """Mixin providing timestamp fields for models."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class EmbeddedModel(BaseModel):
    """
    Base model for values embedded in a resume aggregate.

    Use this for models that live inside another record rather than in
    their own collection.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
    )


class ChildRecord(EmbeddedModel):
    """
    A record in one of a resume's ordered collections.

    Identity is stable across imports; position is order_index, which the
    owning aggregate keeps contiguous from zero.
    """

    id: UUID = Field(default_factory=uuid4)
    visible: bool = True
    order_index: int = Field(default=0, ge=0)

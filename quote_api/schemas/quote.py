from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictStr, field_serializer


class QuotePayload(BaseModel):
    """Body of ``POST /quotes`` and ``PUT /quotes/{id}``; both fields are required."""

    book: StrictStr
    quote: StrictStr


class QuoteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    book: str
    quote: str
    inserted_at: datetime
    updated_at: datetime

    @field_serializer("inserted_at", "updated_at")
    def _as_utc_rfc3339(self, value: datetime) -> str:
        # SQLite hands timestamps back without tzinfo; they were written as UTC.
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()

from __future__ import annotations

import enum
import logging
import uuid
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quote_api.models.common import utcnow
from quote_api.models.quote import Quote
from quote_api.schemas.quote import QuoteOut

logger = logging.getLogger(__name__)


class Outcome(str, enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class ServiceResult:
    outcome: Outcome
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


def _store_failure(db: Session, operation: str, **context: Any) -> ServiceResult:
    logger.error("quote_%s_failed %s", operation, " ".join(f"{k}={v}" for k, v in context.items()), exc_info=True)
    try:
        db.rollback()
    except SQLAlchemyError:
        logger.debug("quote_%s_rollback_failed", operation, exc_info=True)
    return ServiceResult(Outcome.STORE_ERROR)


def _affected(rowcount: int | None) -> ServiceResult:
    # One row at most can match a primary key.
    return ServiceResult(Outcome.OK if rowcount else Outcome.NOT_FOUND)


def health_check() -> ServiceResult:
    return ServiceResult(Outcome.OK)


def create_quote(db: Session, *, book: str, quote: str) -> ServiceResult:
    """Insert a new quote; id and both timestamps are generated here."""
    now = utcnow()
    row = Quote(id=uuid.uuid4(), book=book, quote=quote, inserted_at=now, updated_at=now)
    created = QuoteOut.model_validate(row)
    try:
        db.add(row)
        db.commit()
    except SQLAlchemyError:
        return _store_failure(db, "create", id=row.id)
    logger.debug("quote_created id=%s", row.id)
    return ServiceResult(Outcome.OK, created)


def list_quotes(db: Session) -> ServiceResult:
    """All quotes in whatever order the store returns them."""
    try:
        rows = db.query(Quote).populate_existing().all()
        quotes = [QuoteOut.model_validate(r) for r in rows]
        # End the read transaction so the pooled connection goes back now.
        db.rollback()
    except SQLAlchemyError:
        return _store_failure(db, "list")
    return ServiceResult(Outcome.OK, quotes)


def update_quote(db: Session, quote_id: uuid.UUID, *, book: str, quote: str) -> ServiceResult:
    """Replace book and quote text, refreshing ``updated_at``.

    Existence is inferred from the affected row count, so a missing id costs
    the same single statement as a hit.
    """
    stmt = (
        update(Quote)
        .where(Quote.id == quote_id)
        .values(book=book, quote=quote, updated_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError:
        return _store_failure(db, "update", id=quote_id)
    return _affected(result.rowcount)


def delete_quote(db: Session, quote_id: uuid.UUID) -> ServiceResult:
    stmt = delete(Quote).where(Quote.id == quote_id).execution_options(synchronize_session=False)
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError:
        return _store_failure(db, "delete", id=quote_id)
    return _affected(result.rowcount)

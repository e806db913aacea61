"""
Sequence Counter Service - Per-period invoice sequences.

Each scope (a YYMM period token) owns one row in ``counters``. Increments run
as a single INSERT ... ON CONFLICT ... RETURNING statement, so concurrent
callers serialize on the row at the storage layer and never receive the same
value. Peeks read the row without locking and are advisory only.
"""
import logging
from datetime import date
from typing import Optional
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import CounterUnavailable
from app.models.counter import CounterScope

logger = logging.getLogger(__name__)


INCREMENT_SQL = text(
    """
    INSERT INTO counters (name, last_sequence, created_at, updated_at)
    VALUES (:name, 1, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)
    ON CONFLICT (name)
    DO UPDATE SET last_sequence = counters.last_sequence + 1,
                  updated_at = CURRENT_TIMESTAMP
    RETURNING last_sequence
    """
)


def scope_key(on_date: Optional[date] = None) -> str:
    """Return the counter scope for *on_date* (naive local date), e.g. ``2501``."""
    on_date = on_date or date.today()
    return on_date.strftime("%y%m")


class SequenceCounter:
    """Strictly increasing integer per scope, plus a non-reserving peek"""

    def peek_next(self, db: Session, key: str) -> int:
        """
        Return the sequence the next increment would produce for *key*.

        Nothing is persisted. Two concurrent peeks may return the same value and
        the result may already be stale when the caller uses it; treat it as a
        provisional suggestion.
        """
        try:
            last_sequence = (
                db.query(CounterScope.last_sequence)
                .filter(CounterScope.name == key)
                .scalar()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to read counter {key}: {str(e)}")
            raise CounterUnavailable(key, reason=str(e)) from e

        return (last_sequence or 0) + 1

    def increment_and_get(self, db: Session, key: str) -> int:
        """
        Atomically create-or-increment the counter for *key* and return the new value.

        The increment is committed on its own: a number handed out here is never
        handed out again, even if the caller later fails to use it.
        """
        try:
            sequence = db.execute(INCREMENT_SQL, {"name": key}).scalar_one()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to increment counter {key}: {str(e)}", exc_info=True)
            raise CounterUnavailable(key, reason=str(e)) from e

        logger.info(f"Counter {key} advanced to {sequence}")
        return sequence


sequence_counter = SequenceCounter()

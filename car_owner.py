# car_owner.py
"""
Reassigns the owner of a car record.

The update runs as a single parameterized statement inside its own
transaction. Any database failure is rolled back explicitly and reported
through the returned OwnerUpdateResult instead of being raised.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

from schemas import OwnerUpdateResult

logger = logging.getLogger(__name__)

UPDATE_CAR_OWNER_SQL = text("UPDATE car SET owner_id = :owner_id WHERE id = :id")


def _error_message(exc: Exception) -> str:
    # DBAPIError wraps the driver exception, whose message is the useful part
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)


def _check_id(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def update_car_owner(engine: Engine, car_id: int, owner_id: int) -> OwnerUpdateResult:
    """Set car.owner_id for the row whose id is car_id.

    A car_id that matches no row is not an error: the transaction commits
    with zero rows affected.
    """
    _check_id("car_id", car_id)
    _check_id("owner_id", owner_id)

    logger.info("Updating owner of car %s to %s", car_id, owner_id)
    try:
        with engine.connect() as conn:
            trans = conn.begin()
            try:
                result = conn.execute(UPDATE_CAR_OWNER_SQL, {"owner_id": owner_id, "id": car_id})
                rows_affected = result.rowcount
                trans.commit()
            except Exception:
                trans.rollback()
                raise
    except Exception as exc:
        message = _error_message(exc)
        logger.error("Owner update for car %s failed: %s", car_id, message)
        return OwnerUpdateResult(
            car_id=car_id,
            owner_id=owner_id,
            success=False,
            error=message,
        )

    if rows_affected == 0:
        logger.warning("No car with id %s; nothing updated", car_id)
    else:
        logger.info("Car %s now owned by %s", car_id, owner_id)

    return OwnerUpdateResult(
        car_id=car_id,
        owner_id=owner_id,
        success=True,
        rows_affected=rows_affected,
    )

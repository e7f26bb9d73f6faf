# routers/cars.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.engine import Engine

from car_owner import update_car_owner
from database import MissingConnectionStringError, get_engine
from schemas import CarOwnerUpdate, OwnerUpdateResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])


def get_configured_engine() -> Engine:
    try:
        return get_engine()
    except MissingConnectionStringError as exc:
        logger.error("%s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not configured",
        )


@router.put("/{car_id}/owner", response_model=OwnerUpdateResult)
def update_owner(
    car_id: int,
    payload: CarOwnerUpdate,
    engine: Engine = Depends(get_configured_engine),
):
    """Reassign the owner of a car. The update commits on its own transaction."""
    result = update_car_owner(engine, car_id, payload.owner_id)

    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=result.error,
        )
    if result.rows_affected == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found")

    return result

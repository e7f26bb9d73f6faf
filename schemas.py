from typing import Optional
from pydantic import BaseModel, ConfigDict, StrictInt


# --- Car Owner Schemas ---
class CarOwnerUpdate(BaseModel):
    owner_id: StrictInt


class OwnerUpdateResult(BaseModel):
    car_id: int
    owner_id: int
    success: bool
    rows_affected: int = 0
    error: Optional[str] = None
    model_config = ConfigDict(frozen=True)

    @property
    def is_noop(self) -> bool:
        return self.success and self.rows_affected == 0

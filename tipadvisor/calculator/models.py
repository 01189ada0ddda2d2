from __future__ import annotations

from pydantic import BaseModel, Field

# Upper bounds keep bill + tip well inside float range.
MAX_BILL_AMOUNT = 10_000_000.0
MAX_TIP_PERCENTAGE = 100.0


class TipCalculationRequest(BaseModel):
    bill_amount: float = Field(..., ge=0.0, le=MAX_BILL_AMOUNT, allow_inf_nan=False)
    tip_percentage: float | None = Field(
        default=None, ge=0.0, le=MAX_TIP_PERCENTAGE, allow_inf_nan=False
    )
    split_count: int = Field(default=1, ge=1)


class TipBreakdown(BaseModel):
    tip_amount: float
    total_amount: float
    tip_per_person: float
    total_per_person: float

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..calculator.models import MAX_BILL_AMOUNT, MAX_TIP_PERCENTAGE, TipBreakdown


class ServiceType(str, Enum):
    restaurant = "Restaurant"
    food_delivery = "Food Delivery"
    hairstylist = "Hairstylist/Barber"
    taxi = "Taxi/Driver"
    hotel_room_service = "Hotel Room Service"
    other = "Other"


class CountryTippingProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    tipping_customary: bool
    recommended_percentage: float = Field(default=0.0, ge=0.0)


class RatingPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_quality: int = Field(..., ge=1, le=5)
    food_quality: int = Field(..., ge=1, le=5)

    @property
    def average(self) -> float:
        return (self.service_quality + self.food_quality) / 2


class TipRecommendation(BaseModel):
    recommended_tip_percentage: float = Field(..., ge=0.0)
    explanation: str
    strategy: str


class TipRecommendationRequest(BaseModel):
    country: str = Field(..., min_length=1)
    service_quality: int = Field(default=3, ge=1, le=5)
    food_quality: int = Field(default=3, ge=1, le=5)
    service_type: ServiceType | None = None
    bill_amount: float | None = Field(
        default=None, ge=0.0, le=MAX_BILL_AMOUNT, allow_inf_nan=False
    )
    split_count: int = Field(default=1, ge=1)
    current_tip_percentage: float | None = Field(
        default=None,
        ge=0.0,
        le=MAX_TIP_PERCENTAGE,
        allow_inf_nan=False,
        description="Tip already chosen by the user; must be cleared before asking for a recommendation",
    )
    strategy: str = "rule_based"


class TipRecommendationResponse(BaseModel):
    country: str
    recommended_tip_percentage: float
    explanation: str
    strategy: str
    preset_percentage: int | None = None
    nearest_preset_percentage: int
    message: str
    breakdown: TipBreakdown | None = None

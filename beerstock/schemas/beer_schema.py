from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional

from beerstock.models.enums import BeerType


# 맥주 요청/응답 스키마
class BeerDTO(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=200)
    brand: str = Field(..., min_length=1, max_length=200)
    max_quantity: int = Field(..., ge=0, le=500)
    quantity: int = Field(..., ge=0)
    type: BeerType

    model_config = ConfigDict(from_attributes=True)

    # 현재 수량은 최대 수량을 넘을 수 없음
    @model_validator(mode="after")
    def check_quantity_within_capacity(self):
        if self.quantity > self.max_quantity:
            raise ValueError("quantity must not exceed max_quantity")
        return self


# 재고 증감 요청 스키마
class QuantityDTO(BaseModel):
    quantity: int = Field(..., ge=0, le=100)

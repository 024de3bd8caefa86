from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.models import OrderStatus


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    paid: Optional[int] = None
    status: OrderStatus
    payment_link: Optional[str] = None
    user_id: int
    wishes: List[int]


class OrderUpdate(BaseModel):
    status: Optional[OrderStatus] = None
    payment_link: Optional[str] = None


class PriceEntry(BaseModel):
    amount: int = Field(ge=0)
    currency: str = Field(default="usd", min_length=3, max_length=3, pattern=r"^[A-Za-z]{3}$")
    effective_date: date = Field(default_factory=date.today)


class PriceOut(PriceEntry):
    model_config = ConfigDict(from_attributes=True)

    id: int


class OfferCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    base_price: int = Field(default=0, ge=0)
    image: str = "No_image"
    is_active: bool = True


class OfferUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    base_price: Optional[int] = Field(default=None, ge=0)
    image: Optional[str] = None
    is_active: Optional[bool] = None


class OfferOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    base_price: int
    image: str
    is_active: bool
    prices: List[PriceOut] = []


class OfferPage(BaseModel):
    data: List[OfferOut]
    total_pages: int


class Message(BaseModel):
    message: str

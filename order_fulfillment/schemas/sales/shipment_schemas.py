from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional
from datetime import date

from order_fulfillment.core.config import SHIPMENT_MAX_QUANTITY, SHIPMENT_MAX_PACKAGES
from order_fulfillment.models.enums.stock_status import StockStatus
from order_fulfillment.schemas.sales.sales_order_schemas import (
    SalesOrderItemIn,
    ensure_unique_item_ids,
)

# =====================================================
# SHIPMENT CREATE (form payload)
# =====================================================

class ShipmentCreate(BaseModel):
    shipping_no: str = Field(min_length=1, max_length=64)
    shipping_date: date
    order_item: int = Field(ge=1)
    quantity: int = Field(ge=1, le=SHIPMENT_MAX_QUANTITY)
    package_number: int = Field(ge=1, le=SHIPMENT_MAX_PACKAGES)
    shipping_note: Optional[str] = None

    @field_validator("shipping_no")
    @classmethod
    def shipping_no_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Shipping number is required")
        return value


class ShipmentValidationRequest(BaseModel):
    order_number: Optional[str] = None
    items: List[SalesOrderItemIn] = Field(min_length=1)
    shipment: ShipmentCreate
    expected_signature: Optional[str] = None

    @model_validator(mode="after")
    def check_unique_ids(self):
        ensure_unique_item_ids(self.items)
        return self


# =====================================================
# SHIPMENT RESPONSES
# =====================================================

class ShipmentValidationOut(BaseModel):
    order_item: int
    valid: bool
    proposed_quantity: int
    remaining_quantity: int
    remaining_after_shipment: int
    current_stock: int
    stock_status: StockStatus
    signature: str


class ShippableItemOut(BaseModel):
    id: int
    product: int
    product_code: Optional[str]
    product_name: Optional[str]
    ordered_quantity: int
    fulfilled_quantity: int
    remaining_quantity: int
    current_stock: int
    stock_status: StockStatus
    deadline_date: date
    kapsam_deadline_date: Optional[date]


class ShippableItemsData(BaseModel):
    total: int
    items: List[ShippableItemOut]

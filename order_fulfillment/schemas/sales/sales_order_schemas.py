from pydantic import BaseModel, Field, model_validator
from typing import List, Optional, Union
from datetime import datetime, date

from order_fulfillment.models.enums.sales_order_status import SalesOrderStatus
from order_fulfillment.models.enums.stock_status import StockStatus
from order_fulfillment.models.enums.item_progress import ItemProgress
from order_fulfillment.models.enums.deadline_status import DeadlineStatus

# =====================================================
# ORDER SNAPSHOT PAYLOADS (as read from the sales backend)
# =====================================================

class ProductSnapshot(BaseModel):
    id: int
    product_code: Optional[str] = None
    product_name: Optional[str] = None
    current_stock: Optional[int] = Field(None, ge=0)


class SalesOrderItemIn(BaseModel):
    id: int
    product: int
    product_details: Optional[ProductSnapshot] = None
    ordered_quantity: int = Field(ge=1)
    fulfilled_quantity: Optional[int] = Field(0, ge=0)
    deadline_date: date
    kapsam_deadline_date: Optional[date] = None
    receiving_date: Optional[date] = None


class ShipmentIn(BaseModel):
    id: Optional[Union[int, str]] = None
    shipping_no: str = Field(min_length=1)
    shipping_date: date
    order_item: int
    quantity: int = Field(ge=1)
    package_number: int = Field(ge=1)
    shipping_note: Optional[str] = None


def ensure_unique_item_ids(items: List[SalesOrderItemIn]) -> None:
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"Duplicate order item id {item.id}")
        seen.add(item.id)


class SalesOrderIn(BaseModel):
    id: Union[int, str]
    order_number: str
    customer: int
    customer_name: Optional[str] = None
    status: SalesOrderStatus = SalesOrderStatus.OPEN
    created_at: Optional[datetime] = None
    items: List[SalesOrderItemIn] = []
    shipments: List[ShipmentIn] = []

    @model_validator(mode="after")
    def check_references(self):
        ensure_unique_item_ids(self.items)
        item_ids = {i.id for i in self.items}
        for shipment in self.shipments:
            if shipment.order_item not in item_ids:
                raise ValueError(
                    f"Shipment {shipment.shipping_no} references unknown order item {shipment.order_item}"
                )
        return self


class OrderItemsIn(BaseModel):
    items: List[SalesOrderItemIn]

    @model_validator(mode="after")
    def check_unique_ids(self):
        ensure_unique_item_ids(self.items)
        return self


# =====================================================
# DEADLINE RESPONSES
# =====================================================

class DeadlineBucketsOut(BaseModel):
    overdue: int
    due_this_week: int
    due_this_month: int


class DeadlineStatusCountsOut(BaseModel):
    completed: int
    overdue: int
    due_this_week: int
    due_this_month: int
    due_later: int


class DeadlinesOut(BaseModel):
    as_of: date
    buckets: DeadlineBucketsOut
    statuses: DeadlineStatusCountsOut


# =====================================================
# ITEM RESPONSES
# =====================================================

class ItemStockStatusOut(BaseModel):
    id: int
    product: int
    remaining_quantity: int
    current_stock: int
    stock_status: StockStatus
    needs_production: bool


class ItemStockStatusData(BaseModel):
    total: int
    insufficient_count: int
    items: List[ItemStockStatusOut]


class ItemFulfillmentOut(BaseModel):
    id: int
    product: int
    product_code: Optional[str]
    product_name: Optional[str]

    ordered_quantity: int
    fulfilled_quantity: int
    remaining_quantity: int
    shipped_quantity: int
    progress_percent: int
    progress: ItemProgress

    current_stock: int
    stock_status: StockStatus

    deadline_date: date
    kapsam_deadline_date: Optional[date]
    receiving_date: Optional[date]
    deadline_status: DeadlineStatus
    overdue: bool
    due_this_week: bool
    due_this_month: bool


# =====================================================
# ORDER RESPONSES
# =====================================================

class OrderSummaryOut(BaseModel):
    items_count: int
    total_ordered_quantity: int
    total_fulfilled_quantity: int
    total_remaining_quantity: int
    total_shipped_quantity: int
    completed_items_count: int
    completion_rate: int
    shipping_rate: int
    signature: str


class OrderFulfillmentOut(BaseModel):
    id: Union[int, str]
    order_number: str
    customer: int
    customer_name: Optional[str]
    status: SalesOrderStatus
    status_display: str
    created_at: Optional[datetime]

    summary: OrderSummaryOut
    deadlines: DeadlinesOut
    items: List[ItemFulfillmentOut]

"""
Order fulfillment accounting.

Pure functions over sales order items and shipments: quantity rollups,
completion and shipping rates, stock sufficiency, shipment quantity checks
and deadline buckets. Items and shipments may be pydantic schemas, plain
objects or the raw dicts returned by the sales backend; only the fields
named below are read.

Nothing here touches FastAPI, logging or I/O, and nothing raises for data
conditions: a zero ordered total gives a 0% rate and an over-shipment gives
an invalid check result.
"""

import calendar
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from order_fulfillment.models.enums.deadline_status import DeadlineStatus
from order_fulfillment.models.enums.item_progress import ItemProgress
from order_fulfillment.models.enums.stock_status import StockStatus
from order_fulfillment.utils.decimal_utils import percent
from order_fulfillment.utils.signature import generate_item_signature

DUE_SOON_DAYS = 7
DUE_MONTH_DAYS = 30


def _field(obj: Any, name: str, default=None):
    if isinstance(obj, Mapping):
        value = obj.get(name, default)
    else:
        value = getattr(obj, name, default)
    return default if value is None else value


def _as_date(value) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def ordered_of(item) -> int:
    return int(_field(item, "ordered_quantity", 0))


def fulfilled_of(item) -> int:
    return int(_field(item, "fulfilled_quantity", 0))


def current_stock_of(item) -> int:
    product = _field(item, "product_details")
    if product is None:
        return 0
    return int(_field(product, "current_stock", 0))


# =====================================================
# ORDER AGGREGATOR
# =====================================================

def total_ordered_quantity(items: Iterable) -> int:
    return sum(ordered_of(i) for i in items)


def total_fulfilled_quantity(items: Iterable) -> int:
    return sum(fulfilled_of(i) for i in items)


def total_shipped_quantity(shipments: Iterable) -> int:
    return sum(int(_field(s, "quantity", 0)) for s in shipments)


def completion_rate(items: Iterable) -> int:
    items = list(items)
    return percent(total_fulfilled_quantity(items), total_ordered_quantity(items))


def shipping_rate(items: Iterable, shipments: Iterable) -> int:
    return percent(total_shipped_quantity(shipments), total_ordered_quantity(items))


def remaining_quantity(item) -> int:
    # Over-fulfilled records exist upstream; never report a negative balance.
    return max(ordered_of(item) - fulfilled_of(item), 0)


def is_item_complete(item) -> bool:
    return fulfilled_of(item) >= ordered_of(item)


def completed_items_count(items: Iterable) -> int:
    return sum(1 for i in items if is_item_complete(i))


def item_progress_percent(item) -> int:
    return percent(fulfilled_of(item), ordered_of(item))


def item_progress(item) -> ItemProgress:
    if is_item_complete(item):
        return ItemProgress.COMPLETE
    if fulfilled_of(item) > 0:
        return ItemProgress.PARTIAL
    return ItemProgress.NOT_STARTED


def shipped_quantity_by_item(shipments: Iterable) -> Dict[int, int]:
    totals: Dict[int, int] = {}
    for s in shipments:
        item_id = int(_field(s, "order_item", 0))
        totals[item_id] = totals.get(item_id, 0) + int(_field(s, "quantity", 0))
    return totals


def shippable_items(items: Iterable) -> List:
    return [i for i in items if remaining_quantity(i) > 0]


def fulfillment_signature(items: Iterable) -> str:
    """Edit token for an item list as it was read.

    Changes whenever an item is added, removed, or has its ordered or
    fulfilled quantity changed.
    """
    return generate_item_signature(
        (int(_field(i, "id", 0)), ordered_of(i), fulfilled_of(i)) for i in items
    )


@dataclass(frozen=True)
class OrderFulfillmentSummary:
    items_count: int
    total_ordered_quantity: int
    total_fulfilled_quantity: int
    total_remaining_quantity: int
    total_shipped_quantity: int
    completed_items_count: int
    completion_rate: int
    shipping_rate: int
    signature: str


def summarize_order(items: Iterable, shipments: Iterable = ()) -> OrderFulfillmentSummary:
    items = list(items)
    shipments = list(shipments)
    ordered = total_ordered_quantity(items)
    fulfilled = total_fulfilled_quantity(items)
    shipped = total_shipped_quantity(shipments)

    return OrderFulfillmentSummary(
        items_count=len(items),
        total_ordered_quantity=ordered,
        total_fulfilled_quantity=fulfilled,
        total_remaining_quantity=sum(remaining_quantity(i) for i in items),
        total_shipped_quantity=shipped,
        completed_items_count=completed_items_count(items),
        completion_rate=percent(fulfilled, ordered),
        shipping_rate=percent(shipped, ordered),
        signature=fulfillment_signature(items),
    )


# =====================================================
# STOCK SUFFICIENCY
# =====================================================

def classify_stock(remaining: int, current_stock: Optional[int]) -> StockStatus:
    current_stock = current_stock or 0
    if remaining == 0:
        return StockStatus.COMPLETE
    if remaining > 0 and current_stock >= remaining:
        return StockStatus.SUFFICIENT
    return StockStatus.INSUFFICIENT


def stock_status_for_item(item) -> StockStatus:
    return classify_stock(remaining_quantity(item), current_stock_of(item))


# =====================================================
# SHIPMENT QUANTITY
# =====================================================

@dataclass(frozen=True)
class ShipmentQuantityCheck:
    valid: bool
    remaining_quantity: int
    proposed_quantity: int
    message: str = ""


def validate_shipment_quantity(item, proposed_quantity: int) -> ShipmentQuantityCheck:
    """Advisory over-shipment check for one order item.

    The backend re-validates on create; this only lets a caller refuse the
    submission early and show the remaining quantity.
    """
    remaining = remaining_quantity(item)
    if proposed_quantity > remaining:
        return ShipmentQuantityCheck(
            valid=False,
            remaining_quantity=remaining,
            proposed_quantity=proposed_quantity,
            message=f"Shipment quantity cannot exceed the remaining quantity ({remaining})",
        )
    return ShipmentQuantityCheck(
        valid=True,
        remaining_quantity=remaining,
        proposed_quantity=proposed_quantity,
    )


# =====================================================
# DEADLINES
# =====================================================

def add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


@dataclass(frozen=True)
class DeadlineBuckets:
    overdue: bool
    due_this_week: bool
    due_this_month: bool


def classify_deadline(item, today: date) -> DeadlineBuckets:
    """Independent dashboard buckets; an item due this week is also due this month."""
    deadline = _as_date(_field(item, "deadline_date"))
    if deadline is None:
        return DeadlineBuckets(False, False, False)

    return DeadlineBuckets(
        overdue=deadline < today and fulfilled_of(item) < ordered_of(item),
        due_this_week=today <= deadline <= today + timedelta(days=DUE_SOON_DAYS),
        due_this_month=today <= deadline <= add_months(today, 1),
    )


@dataclass
class DeadlineBucketCounts:
    overdue: int = 0
    due_this_week: int = 0
    due_this_month: int = 0


def count_deadline_buckets(items: Iterable, today: date) -> DeadlineBucketCounts:
    counts = DeadlineBucketCounts()
    for item in items:
        buckets = classify_deadline(item, today)
        counts.overdue += buckets.overdue
        counts.due_this_week += buckets.due_this_week
        counts.due_this_month += buckets.due_this_month
    return counts


def deadline_status(
    item,
    today: date,
    due_soon_days: int = DUE_SOON_DAYS,
    due_month_days: int = DUE_MONTH_DAYS,
) -> DeadlineStatus:
    if is_item_complete(item):
        return DeadlineStatus.COMPLETED

    deadline = _as_date(_field(item, "deadline_date"))
    if deadline is None:
        return DeadlineStatus.DUE_LATER

    days_left = (deadline - today).days
    if days_left < 0:
        return DeadlineStatus.OVERDUE
    if days_left <= due_soon_days:
        return DeadlineStatus.DUE_THIS_WEEK
    if days_left <= due_month_days:
        return DeadlineStatus.DUE_THIS_MONTH
    return DeadlineStatus.DUE_LATER


@dataclass
class DeadlineStatusCounts:
    counts: Dict[DeadlineStatus, int] = field(
        default_factory=lambda: {s: 0 for s in DeadlineStatus}
    )

    def __getitem__(self, status: DeadlineStatus) -> int:
        return self.counts[status]


def group_by_deadline_status(
    items: Iterable,
    today: date,
    due_soon_days: int = DUE_SOON_DAYS,
    due_month_days: int = DUE_MONTH_DAYS,
) -> DeadlineStatusCounts:
    grouped = DeadlineStatusCounts()
    for item in items:
        grouped.counts[deadline_status(item, today, due_soon_days, due_month_days)] += 1
    return grouped

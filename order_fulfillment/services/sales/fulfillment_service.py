import logging
from datetime import date
from typing import List

from order_fulfillment.core.config import DUE_SOON_DAYS, DUE_MONTH_DAYS
from order_fulfillment.models.enums.deadline_status import DeadlineStatus
from order_fulfillment.models.enums.stock_status import StockStatus
from order_fulfillment.schemas.sales.sales_order_schemas import (
    SalesOrderIn,
    SalesOrderItemIn,
    DeadlineBucketsOut,
    DeadlineStatusCountsOut,
    DeadlinesOut,
    ItemStockStatusOut,
    ItemStockStatusData,
    ItemFulfillmentOut,
    OrderSummaryOut,
    OrderFulfillmentOut,
)
from order_fulfillment.services.sales import fulfillment_core as core
from order_fulfillment.utils.pdf_generators.order_report_pdf import build_order_report_pdf

logger = logging.getLogger(__name__)


def _product_field(item: SalesOrderItemIn, name: str):
    if item.product_details is None:
        return None
    return getattr(item.product_details, name)


def _map_item(item: SalesOrderItemIn, shipped: int, today: date) -> ItemFulfillmentOut:
    buckets = core.classify_deadline(item, today)
    return ItemFulfillmentOut(
        id=item.id,
        product=item.product,
        product_code=_product_field(item, "product_code"),
        product_name=_product_field(item, "product_name"),
        ordered_quantity=item.ordered_quantity,
        fulfilled_quantity=core.fulfilled_of(item),
        remaining_quantity=core.remaining_quantity(item),
        shipped_quantity=shipped,
        progress_percent=core.item_progress_percent(item),
        progress=core.item_progress(item),
        current_stock=core.current_stock_of(item),
        stock_status=core.stock_status_for_item(item),
        deadline_date=item.deadline_date,
        kapsam_deadline_date=item.kapsam_deadline_date,
        receiving_date=item.receiving_date,
        deadline_status=core.deadline_status(item, today, DUE_SOON_DAYS, DUE_MONTH_DAYS),
        overdue=buckets.overdue,
        due_this_week=buckets.due_this_week,
        due_this_month=buckets.due_this_month,
    )


def summarize_deadlines(items: List[SalesOrderItemIn], today: date) -> DeadlinesOut:
    buckets = core.count_deadline_buckets(items, today)
    statuses = core.group_by_deadline_status(items, today, DUE_SOON_DAYS, DUE_MONTH_DAYS)

    return DeadlinesOut(
        as_of=today,
        buckets=DeadlineBucketsOut(
            overdue=buckets.overdue,
            due_this_week=buckets.due_this_week,
            due_this_month=buckets.due_this_month,
        ),
        statuses=DeadlineStatusCountsOut(
            completed=statuses[DeadlineStatus.COMPLETED],
            overdue=statuses[DeadlineStatus.OVERDUE],
            due_this_week=statuses[DeadlineStatus.DUE_THIS_WEEK],
            due_this_month=statuses[DeadlineStatus.DUE_THIS_MONTH],
            due_later=statuses[DeadlineStatus.DUE_LATER],
        ),
    )


def list_stock_status(items: List[SalesOrderItemIn]) -> ItemStockStatusData:
    rows = []
    for item in items:
        status = core.stock_status_for_item(item)
        rows.append(
            ItemStockStatusOut(
                id=item.id,
                product=item.product,
                remaining_quantity=core.remaining_quantity(item),
                current_stock=core.current_stock_of(item),
                stock_status=status,
                needs_production=status == StockStatus.INSUFFICIENT,
            )
        )

    insufficient = sum(1 for r in rows if r.needs_production)
    if insufficient:
        logger.info(
            "Items short on stock",
            extra={"insufficient_count": insufficient, "items_count": len(rows)},
        )

    return ItemStockStatusData(
        total=len(rows),
        insufficient_count=insufficient,
        items=rows,
    )


def build_order_fulfillment(order: SalesOrderIn, today: date) -> OrderFulfillmentOut:
    logger.info(
        "Build order fulfillment",
        extra={"order_number": order.order_number, "items_count": len(order.items)},
    )

    summary = core.summarize_order(order.items, order.shipments)
    shipped_by_item = core.shipped_quantity_by_item(order.shipments)

    return OrderFulfillmentOut(
        id=order.id,
        order_number=order.order_number,
        customer=order.customer,
        customer_name=order.customer_name,
        status=order.status,
        status_display=order.status.display,
        created_at=order.created_at,
        summary=OrderSummaryOut(
            items_count=summary.items_count,
            total_ordered_quantity=summary.total_ordered_quantity,
            total_fulfilled_quantity=summary.total_fulfilled_quantity,
            total_remaining_quantity=summary.total_remaining_quantity,
            total_shipped_quantity=summary.total_shipped_quantity,
            completed_items_count=summary.completed_items_count,
            completion_rate=summary.completion_rate,
            shipping_rate=summary.shipping_rate,
            signature=summary.signature,
        ),
        deadlines=summarize_deadlines(order.items, today),
        items=[
            _map_item(item, shipped_by_item.get(item.id, 0), today)
            for item in order.items
        ],
    )


def render_order_report(order: SalesOrderIn, today: date) -> bytes:
    fulfillment = build_order_fulfillment(order, today)
    pdf = build_order_report_pdf(fulfillment)
    logger.info(
        "Order report generated",
        extra={"order_number": order.order_number, "size_bytes": len(pdf)},
    )
    return pdf

from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from order_fulfillment.core.clock import get_today
from order_fulfillment.utils.response import success_response, APIResponse

from order_fulfillment.schemas.sales.sales_order_schemas import (
    SalesOrderIn,
    OrderItemsIn,
    OrderFulfillmentOut,
    ItemStockStatusData,
    DeadlinesOut,
)

from order_fulfillment.services.sales.fulfillment_service import (
    build_order_fulfillment,
    list_stock_status,
    summarize_deadlines,
    render_order_report,
)

router = APIRouter(
    prefix="/sales/orders",
    tags=["Sales Orders"],
)


def resolve_today(
    as_of: date | None = Query(None, description="Evaluate deadlines as of this date"),
    today: date = Depends(get_today),
) -> date:
    return as_of or today


@router.post(
    "/summary",
    response_model=APIResponse[OrderFulfillmentOut],
)
async def order_summary_api(
    payload: SalesOrderIn,
    today: date = Depends(resolve_today),
):
    data = build_order_fulfillment(payload, today)
    return success_response(
        "Order fulfillment computed successfully",
        data,
    )


@router.post(
    "/items/stock-status",
    response_model=APIResponse[ItemStockStatusData],
)
async def items_stock_status_api(payload: OrderItemsIn):
    data = list_stock_status(payload.items)
    return success_response(
        "Stock status computed successfully",
        data,
    )


@router.post(
    "/deadlines",
    response_model=APIResponse[DeadlinesOut],
)
async def order_deadlines_api(
    payload: OrderItemsIn,
    today: date = Depends(resolve_today),
):
    data = summarize_deadlines(payload.items, today)
    return success_response(
        "Deadline summary computed successfully",
        data,
    )


@router.post(
    "/report",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def order_report_api(
    payload: SalesOrderIn,
    today: date = Depends(resolve_today),
):
    pdf = render_order_report(payload, today)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="order_{payload.order_number}.pdf"'
        },
    )

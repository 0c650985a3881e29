import logging
from typing import List

from order_fulfillment.core.exceptions import AppException, ShipmentQuantityExceeded
from order_fulfillment.constants.error_codes import ErrorCode
from order_fulfillment.schemas.sales.sales_order_schemas import SalesOrderItemIn
from order_fulfillment.schemas.sales.shipment_schemas import (
    ShipmentValidationRequest,
    ShipmentValidationOut,
    ShippableItemOut,
    ShippableItemsData,
)
from order_fulfillment.services.sales import fulfillment_core as core

logger = logging.getLogger(__name__)


def _find_item(items: List[SalesOrderItemIn], item_id: int) -> SalesOrderItemIn:
    for item in items:
        if item.id == item_id:
            return item
    raise AppException(
        404,
        "Order item not found",
        ErrorCode.ORDER_ITEM_NOT_FOUND,
        {"order_item": item_id},
    )


def _check_signature(items: List[SalesOrderItemIn], expected: str | None) -> str:
    current = core.fulfillment_signature(items)
    if expected is not None and expected != current:
        logger.warning(
            "Stale order items on shipment validation",
            extra={"expected_signature": expected, "current_signature": current},
        )
        raise AppException(
            409,
            "Order items changed since they were loaded. Reload the order and try again.",
            ErrorCode.STALE_ORDER_ITEMS,
            {"expected_signature": expected, "current_signature": current},
        )
    return current


def validate_shipment(payload: ShipmentValidationRequest) -> ShipmentValidationOut:
    shipment = payload.shipment
    logger.info(
        "Validate shipment",
        extra={
            "order_number": payload.order_number,
            "order_item": shipment.order_item,
            "quantity": shipment.quantity,
        },
    )

    item = _find_item(payload.items, shipment.order_item)
    signature = _check_signature(payload.items, payload.expected_signature)

    check = core.validate_shipment_quantity(item, shipment.quantity)
    if not check.valid:
        logger.warning(
            "Shipment quantity exceeds remaining",
            extra={
                "order_item": item.id,
                "remaining_quantity": check.remaining_quantity,
                "proposed_quantity": check.proposed_quantity,
            },
        )
        raise ShipmentQuantityExceeded(
            remaining_quantity=check.remaining_quantity,
            proposed_quantity=check.proposed_quantity,
            message=check.message,
        )

    return ShipmentValidationOut(
        order_item=item.id,
        valid=True,
        proposed_quantity=check.proposed_quantity,
        remaining_quantity=check.remaining_quantity,
        remaining_after_shipment=check.remaining_quantity - check.proposed_quantity,
        current_stock=core.current_stock_of(item),
        stock_status=core.stock_status_for_item(item),
        signature=signature,
    )


def list_shippable_items(items: List[SalesOrderItemIn]) -> ShippableItemsData:
    rows = [
        ShippableItemOut(
            id=item.id,
            product=item.product,
            product_code=item.product_details.product_code if item.product_details else None,
            product_name=item.product_details.product_name if item.product_details else None,
            ordered_quantity=item.ordered_quantity,
            fulfilled_quantity=core.fulfilled_of(item),
            remaining_quantity=core.remaining_quantity(item),
            current_stock=core.current_stock_of(item),
            stock_status=core.stock_status_for_item(item),
            deadline_date=item.deadline_date,
            kapsam_deadline_date=item.kapsam_deadline_date,
        )
        for item in core.shippable_items(items)
    ]
    return ShippableItemsData(total=len(rows), items=rows)

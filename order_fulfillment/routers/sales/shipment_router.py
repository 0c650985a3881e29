from fastapi import APIRouter

from order_fulfillment.utils.response import success_response, APIResponse

from order_fulfillment.schemas.sales.sales_order_schemas import OrderItemsIn
from order_fulfillment.schemas.sales.shipment_schemas import (
    ShipmentValidationRequest,
    ShipmentValidationOut,
    ShippableItemsData,
)

from order_fulfillment.services.sales.shipment_service import (
    validate_shipment,
    list_shippable_items,
)

router = APIRouter(
    prefix="/sales/shipments",
    tags=["Shipments"],
)


@router.post(
    "/validate",
    response_model=APIResponse[ShipmentValidationOut],
)
async def validate_shipment_api(payload: ShipmentValidationRequest):
    data = validate_shipment(payload)
    return success_response(
        "Shipment is valid",
        data,
    )


@router.post(
    "/shippable-items",
    response_model=APIResponse[ShippableItemsData],
)
async def shippable_items_api(payload: OrderItemsIn):
    data = list_shippable_items(payload.items)
    message = (
        "Shippable items retrieved successfully"
        if data.total
        else "All order items are fully shipped"
    )
    return success_response(message, data)

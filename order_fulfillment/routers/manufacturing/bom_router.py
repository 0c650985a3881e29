from fastapi import APIRouter

from order_fulfillment.utils.response import success_response, APIResponse

from order_fulfillment.schemas.manufacturing.bom_schemas import (
    BOMComponentsIn,
    BOMArrangementOut,
)

from order_fulfillment.services.manufacturing.bom_service import arrange_components

router = APIRouter(
    prefix="/boms",
    tags=["BOMs"],
)


@router.post(
    "/components/arrange",
    response_model=APIResponse[BOMArrangementOut],
)
async def arrange_components_api(payload: BOMComponentsIn):
    data = arrange_components(payload)
    return success_response(
        "BOM components arranged successfully",
        data,
    )

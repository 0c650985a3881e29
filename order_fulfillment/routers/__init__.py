# order_fulfillment/routers/__init__.py

from .sales.fulfillment_router import router as fulfillment_router
from .sales.shipment_router import router as shipment_router

from .manufacturing.bom_router import router as bom_router


__all__ = [
"fulfillment_router",
"shipment_router",

"bom_router",
]

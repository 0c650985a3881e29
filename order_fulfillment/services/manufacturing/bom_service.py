import logging
from collections import Counter

from order_fulfillment.models.enums.bom_component_type import BOMComponentType
from order_fulfillment.schemas.manufacturing.bom_schemas import (
    BOMComponentsIn,
    BOMArrangementOut,
)

logger = logging.getLogger(__name__)


def arrange_components(payload: BOMComponentsIn) -> BOMArrangementOut:
    """Order a BOM's components for display and editing.

    Sub-BOMs referenced through ``active_bom_id`` are listed, not expanded.
    """
    components = sorted(payload.components, key=lambda c: c.sequence_order)

    sequence_counts = Counter(c.sequence_order for c in components)
    duplicates = sorted(seq for seq, n in sequence_counts.items() if n > 1)
    if duplicates:
        logger.warning(
            "BOM has duplicate sequence orders",
            extra={"bom_id": payload.bom_id, "sequence_orders": duplicates},
        )

    sub_bom_ids = []
    for c in components:
        if c.component_type != BOMComponentType.PRODUCT.value:
            continue
        bom_id = c.product_component.active_bom_id
        if bom_id is not None and bom_id not in sub_bom_ids:
            sub_bom_ids.append(bom_id)

    product_count = sum(1 for c in components if c.component_type == BOMComponentType.PRODUCT.value)

    return BOMArrangementOut(
        bom_id=payload.bom_id,
        components=components,
        product_count=product_count,
        process_count=len(components) - product_count,
        next_sequence_order=max((c.sequence_order for c in components), default=0) + 1,
        sub_bom_ids=sub_bom_ids,
        duplicate_sequence_orders=duplicates,
    )

from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union
from decimal import Decimal

# =====================================================
# COMPONENT PAYLOADS
# =====================================================

class ProductComponentRef(BaseModel):
    id: int
    product_code: str
    product_name: Optional[str] = None
    active_bom_id: Optional[int] = None


class ProcessComponentRef(BaseModel):
    id: int
    process_code: str
    process_name: Optional[str] = None


class ProductBOMComponent(BaseModel):
    component_type: Literal["PRODUCT"] = "PRODUCT"
    id: Optional[int] = None
    sequence_order: int = Field(ge=1)
    quantity: Decimal = Field(gt=0)
    lead_time_days: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    product_component: ProductComponentRef


class ProcessBOMComponent(BaseModel):
    component_type: Literal["PROCESS"] = "PROCESS"
    id: Optional[int] = None
    sequence_order: int = Field(ge=1)
    notes: Optional[str] = None
    process_component: ProcessComponentRef


BOMComponentIn = Annotated[
    Union[ProductBOMComponent, ProcessBOMComponent],
    Field(discriminator="component_type"),
]


class BOMComponentsIn(BaseModel):
    bom_id: Optional[int] = None
    components: List[BOMComponentIn] = []


# =====================================================
# RESPONSES
# =====================================================

class BOMArrangementOut(BaseModel):
    bom_id: Optional[int]
    components: List[BOMComponentIn]
    product_count: int
    process_count: int
    next_sequence_order: int
    sub_bom_ids: List[int]
    duplicate_sequence_orders: List[int]

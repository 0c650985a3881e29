# order_fulfillment/models/enums/bom_component_type.py
import enum


class BOMComponentType(str, enum.Enum):
    PRODUCT = "PRODUCT"
    PROCESS = "PROCESS"

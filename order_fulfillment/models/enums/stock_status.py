# order_fulfillment/models/enums/stock_status.py
import enum


class StockStatus(str, enum.Enum):
    COMPLETE = "COMPLETE"
    SUFFICIENT = "SUFFICIENT"
    INSUFFICIENT = "INSUFFICIENT"

# order_fulfillment/models/enums/sales_order_status.py
import enum


class SalesOrderStatus(str, enum.Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"

    @property
    def display(self) -> str:
        return SALES_ORDER_STATUS_DISPLAY[self]


SALES_ORDER_STATUS_DISPLAY = {
    SalesOrderStatus.OPEN: "Open",
    SalesOrderStatus.CLOSED: "Closed",
}

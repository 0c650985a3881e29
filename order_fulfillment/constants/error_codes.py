# order_fulfillment/constants/error_codes.py

from enum import Enum


class ErrorCode(str, Enum):
    # ---------------- GENERIC ----------------
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # ---------------- SALES ORDERS ----------------
    ORDER_ITEM_NOT_FOUND = "ORDER_ITEM_NOT_FOUND"
    STALE_ORDER_ITEMS = "STALE_ORDER_ITEMS"

    # ---------------- SHIPMENTS ----------------
    SHIPMENT_QUANTITY_EXCEEDED = "SHIPMENT_QUANTITY_EXCEEDED"

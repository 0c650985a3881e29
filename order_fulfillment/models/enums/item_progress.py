# order_fulfillment/models/enums/item_progress.py
import enum


class ItemProgress(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    PARTIAL = "PARTIAL"
    COMPLETE = "COMPLETE"

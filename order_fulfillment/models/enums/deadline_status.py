# order_fulfillment/models/enums/deadline_status.py
import enum


class DeadlineStatus(str, enum.Enum):
    COMPLETED = "COMPLETED"
    OVERDUE = "OVERDUE"
    DUE_THIS_WEEK = "DUE_THIS_WEEK"
    DUE_THIS_MONTH = "DUE_THIS_MONTH"
    DUE_LATER = "DUE_LATER"

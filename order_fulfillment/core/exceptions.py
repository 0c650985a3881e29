from fastapi import HTTPException
from order_fulfillment.constants.error_codes import ErrorCode


class AppException(HTTPException):
    """Recoverable, caller-facing failure raised from the service layer."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode,
        details: dict | None = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error_code = error_code
        self.details = details


class ShipmentQuantityExceeded(AppException):
    def __init__(self, remaining_quantity: int, proposed_quantity: int, message: str):
        super().__init__(
            422,
            message,
            ErrorCode.SHIPMENT_QUANTITY_EXCEEDED,
            {
                "remaining_quantity": remaining_quantity,
                "proposed_quantity": proposed_quantity,
            },
        )
        self.remaining_quantity = remaining_quantity

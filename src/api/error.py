"""HTTP error mapping for use case errors"""

from typing import Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

NOT_FOUND_CODES = {"PRODUCT_NOT_FOUND", "BILL_NOT_FOUND", "PAYMENT_NOT_FOUND"}
CONFLICT_CODES = {"BILL_NUMBER_CONFLICT"}


class ClientError(Exception):
    """Use case error surfaced to the HTTP client"""

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error)


def status_for(error: Error) -> int:
    """HTTP status for a use case error code"""
    if error.code in NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    if error.code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    if error.code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )


def error_response(code: str, example_message: str) -> dict:
    """OpenAPI response entry for an error code"""
    return {
        "description": example_message,
        "content": {
            "application/json": {
                "example": {"error": {"code": code, "message": example_message}}
            }
        },
    }

# backend/utils/exceptions.py
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class StoreError(Exception):
    """Base class for failures reported to API clients as {success: false, message}."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class DuplicateEmailError(StoreError):
    message = "Email already exists"


class AuthenticationError(StoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class NotFoundError(StoreError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class OrderValidationError(StoreError):
    message = "Invalid order"


class OrderPersistenceError(StoreError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Order could not be saved"


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"success": False, "message": exc.message})


def _describe_validation_error(error: dict) -> str:
    # ("body", "items", 0, "quantity") -> "items.0.quantity"
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    message = error.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = _describe_validation_error(errors[0]) if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"success": False, "message": message},
    )

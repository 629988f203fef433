from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.validators import MISSING_FIELDS, NOT_AN_OBJECT


class DomainError(Exception):
    """Base exception for errors returned to the client as {"error": ...}."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmployeeNotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Employee not found") -> None:
        super().__init__(message)


class DuplicateEmailError(DomainError):
    """Raised when the email unique constraint rejects an insert/update."""

    def __init__(self, message: str = "Email already exists") -> None:
        super().__init__(message)


class StorageError(DomainError):
    """Any other persistence failure. Message is the driver's error text."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    # 저장소 오류는 EmployeeStore 에서 이미 로그를 남긴다
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    요청 바디 검증 실패를 400 {"error": ...} 로 변환. 첫 번째 오류만 사용한다.
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    error_type = first.get("type")

    if error_type == "json_invalid":
        message = NOT_AN_OBJECT
    elif error_type == "missing" and tuple(first.get("loc", ())) == ("body",):
        # 바디 자체가 비어있음
        message = MISSING_FIELDS
    else:
        message = first.get("msg") or "Invalid request"

    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(exc.status_code, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

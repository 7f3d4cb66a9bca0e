from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from eurofx.services.rates.errors import CurrencyNotFound, RateDataUnavailable

logger = logging.getLogger("eurofx.errors")


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "not_found",
                "detail": f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # pydantic v2 may put the raw exception object under "ctx"
    out = []
    for err in exc.errors():
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        out.append(err)
    return out


def rate_data_unavailable_handler(request: Request, exc: RateDataUnavailable):  # type: ignore
    logger.warning("rate data unavailable (%s): %s", exc.reason, exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "rate_data_unavailable",
            "reason": exc.reason,
            "detail": str(exc),
        },
    )


def currency_not_found_handler(request: Request, exc: CurrencyNotFound):  # type: ignore
    logger.info("currency not found: %s", ", ".join(exc.codes))
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "currency_not_found",
            "codes": list(exc.codes),
            "detail": str(exc),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )

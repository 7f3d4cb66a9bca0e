from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from eurofx.core.config import Settings
from eurofx.models.conversion import ConversionOut
from eurofx.services.converter_service import ConverterService
from eurofx.services.rates.base import RateSource
from eurofx.services.rates.fetcher import RateTableFetcher

"""Conversion router.

Endpoints (one upstream fetch per request, nothing cached):
    - GET /from-euro?to=USD&value=10
    - GET /to-euro?from=USD&value=10
    - GET /convert?from=USD&to=JPY&value=10

Rate data failures and unknown codes are raised as typed exceptions and
mapped to JSON responses by the handlers in eurofx.core.errors.
"""

router = APIRouter(tags=["convert"])


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rate_source(settings: Settings = Depends(get_app_settings)) -> RateSource:
    return RateTableFetcher.from_settings(settings)


def get_converter_service(
    settings: Settings = Depends(get_app_settings),
    source: RateSource = Depends(get_rate_source),
) -> ConverterService:
    return ConverterService(source, base_currency=settings.base_currency)


def _code(v: str) -> str:
    return v.strip().upper()


@router.get(
    "/from-euro",
    response_model=ConversionOut,
    summary="Convert an amount from the base currency",
)
def from_euro(
    to: str = Query(..., min_length=1, description="Target currency code"),
    value: float = Query(..., description="Amount to convert"),
    svc: ConverterService = Depends(get_converter_service),
):
    to = _code(to)
    result = svc.from_euro(to, value)
    return ConversionOut(
        from_=svc.base_currency, to=to, value=value, result=result, base=svc.base_currency
    )


@router.get(
    "/to-euro",
    response_model=ConversionOut,
    summary="Convert an amount into the base currency",
)
def to_euro(
    from_: str = Query(..., alias="from", min_length=1, description="Source currency code"),
    value: float = Query(..., description="Amount to convert"),
    svc: ConverterService = Depends(get_converter_service),
):
    from_ = _code(from_)
    result = svc.to_euro(from_, value)
    return ConversionOut(
        from_=from_, to=svc.base_currency, value=value, result=result, base=svc.base_currency
    )


@router.get(
    "/convert",
    response_model=ConversionOut,
    summary="Convert an amount between any two listed currencies",
)
def convert(
    from_: str = Query(..., alias="from", min_length=1, description="Source currency code"),
    to: str = Query(..., min_length=1, description="Target currency code"),
    value: float = Query(..., description="Amount to convert"),
    svc: ConverterService = Depends(get_converter_service),
):
    from_, to = _code(from_), _code(to)
    result = svc.convert(from_, to, value)
    return ConversionOut(
        from_=from_, to=to, value=value, result=result, base=svc.base_currency
    )

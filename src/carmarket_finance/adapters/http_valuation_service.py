"""HTTP client for the external trade-in estimation service."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from carmarket_finance.domain.valuation import (
    ValuationRequest,
    ValuationResult,
    ValuationServiceUnavailable,
    ValuationSource,
)
from carmarket_finance.infra.valuation.config import ValuationServiceSettings
from carmarket_finance.ports.valuation_service import ValuationService

ESTIMATE_TRADE_IN_PATH = "/api/estimate-trade-in"


def build_valuation_client(settings: ValuationServiceSettings) -> httpx.Client:
    headers = {"authorization": f"Bearer {settings.api_key}"} if settings.api_key else {}
    return httpx.Client(
        base_url=settings.base_url or "",
        headers=headers,
        timeout=settings.timeout,
    )


class HttpValuationService(ValuationService):
    """
    Thin client over POST /api/estimate-trade-in.

    Request body (camelCase, as the service expects):
        {"brand", "model", "year", "mileage", "condition", "fuel", "transmission"}

    Response body:
        {"tradeInValue": number, "marketValue": number}

    The client is owned by the caller, which is responsible for closing it.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def estimate(self, request: ValuationRequest) -> ValuationResult:
        try:
            response = self._client.post(ESTIMATE_TRADE_IN_PATH, json=self._to_payload(request))
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise ValuationServiceUnavailable(
                "Valuation service returned an error status",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ValuationServiceUnavailable(
                "Valuation service could not be reached",
                error_type=type(exc).__name__,
            ) from exc
        except ValueError as exc:  # body is not JSON
            raise ValuationServiceUnavailable("Valuation service returned invalid JSON") from exc

        return ValuationResult(
            trade_in_value=self._amount(data, "tradeInValue"),
            market_value=self._amount(data, "marketValue"),
            source=ValuationSource.SERVICE,
        )

    @staticmethod
    def _to_payload(request: ValuationRequest) -> dict[str, Any]:
        return {
            "brand": request.brand,
            "model": request.model,
            "year": request.year,
            "mileage": float(request.mileage),
            "condition": request.condition.value,
            "fuel": request.fuel_kind.value,
            "transmission": request.transmission,
        }

    @staticmethod
    def _amount(data: Any, key: str) -> Decimal:
        value = data.get(key) if isinstance(data, dict) else None
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ValuationServiceUnavailable(
                "Valuation service response is missing a numeric field", field=key
            )
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValuationServiceUnavailable(
                "Valuation service response is missing a numeric field", field=key
            ) from exc
        if not amount.is_finite():
            raise ValuationServiceUnavailable(
                "Valuation service response is missing a numeric field", field=key
            )
        return amount

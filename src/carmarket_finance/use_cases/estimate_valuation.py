"""Estimate a vehicle's trade-in value."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from carmarket_finance.domain.valuation import (
    ValuationConfig,
    ValuationRequest,
    ValuationResult,
    ValuationServiceUnavailable,
    ValuationSource,
)
from carmarket_finance.ports.valuation_service import ValuationService

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")


@dataclass(frozen=True, slots=True)
class EstimateValuationRequest:
    vehicle: ValuationRequest
    as_of_year: int


class EstimateValuation:
    """
    Use case for trade-in estimation.

    Responsibilities:
    - Ask the valuation service first and return its figures verbatim
    - Fall back to the local depreciation formula when no service is
      configured or the service call fails (once, no retry)
    - Always return a result; the caller never sees the service failure
    """

    def __init__(
        self,
        valuation_service: ValuationService | None = None,
        config: ValuationConfig | None = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            valuation_service: External estimator, None for fallback-only mode
            config: Constants of the fallback formula
        """
        self._valuation_service = valuation_service
        self._config = config or ValuationConfig()

    def execute(self, request: EstimateValuationRequest) -> ValuationResult:
        """
        Execute the estimation.

        Args:
            request: Vehicle descriptor and the year the estimate is made in

        Returns:
            ValuationResult tagged with the path that produced it
        """
        if self._valuation_service is not None:
            try:
                return self._valuation_service.estimate(request.vehicle)
            except ValuationServiceUnavailable as exc:
                logger.warning(
                    "Valuation service unavailable, using fallback formula",
                    extra={
                        "error_message": exc.message,
                        "context": exc.context,
                        "brand": request.vehicle.brand,
                        "model": request.vehicle.model,
                    },
                )

        return self.fallback_estimate(request.vehicle, request.as_of_year)

    def fallback_estimate(self, vehicle: ValuationRequest, as_of_year: int) -> ValuationResult:
        """
        Deterministic local estimate.

        market_value = base * year_factor * mileage_factor * condition * brand
        trade_in_value = market_value * trade_in_ratio

        Year and mileage factors are clamped at zero, so market_value >= 0.
        Negative mileage counts as zero.
        """
        config = self._config

        age = as_of_year - vehicle.year
        year_factor = max(ZERO, ONE - age * config.yearly_depreciation)

        mileage = max(ZERO, vehicle.mileage)
        mileage_factor = max(ZERO, ONE - mileage / config.mileage_horizon)

        condition_factor = config.condition_factors[vehicle.condition]
        brand_factor = config.premium_brand_factor if config.is_premium(vehicle.brand) else ONE

        market_value = (
            config.base_value * year_factor * mileage_factor * condition_factor * brand_factor
        )

        return ValuationResult(
            trade_in_value=market_value * config.trade_in_ratio,
            market_value=market_value,
            source=ValuationSource.FALLBACK,
        )

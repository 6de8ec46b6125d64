"""
Dependency injection for FastAPI routes.

Key principle: database sessions and HTTP clients are per-request, not cached.
Calculation use cases are stateless and cheap to build per request too.
"""

from __future__ import annotations

from datetime import date
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from carmarket_finance.adapters.http_valuation_service import (
    HttpValuationService,
    build_valuation_client,
)
from carmarket_finance.adapters.postgres_car_catalog_repository import (
    PostgresCarCatalogRepository,
)
from carmarket_finance.infra.db.session import get_session
from carmarket_finance.infra.valuation.config import ValuationServiceSettings
from carmarket_finance.ports.valuation_service import ValuationService
from carmarket_finance.use_cases.build_amortization_schedule import BuildAmortizationSchedule
from carmarket_finance.use_cases.calculate_loan import CalculateLoan
from carmarket_finance.use_cases.calculate_ownership_cost import CalculateOwnershipCost
from carmarket_finance.use_cases.estimate_valuation import EstimateValuation
from carmarket_finance.use_cases.suggest_calculator_defaults import SuggestCalculatorDefaults


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() context manager commits on success,
    rolls back on exception and always closes the session.
    """
    with get_session() as session:
        yield session


def get_today() -> date:
    """The request's calendar date; the only place the clock is read."""
    return date.today()


def get_calculate_loan_use_case() -> CalculateLoan:
    return CalculateLoan()


def get_build_amortization_schedule_use_case() -> BuildAmortizationSchedule:
    return BuildAmortizationSchedule()


def get_calculate_ownership_cost_use_case() -> CalculateOwnershipCost:
    return CalculateOwnershipCost()


def get_valuation_service() -> Generator[ValuationService | None, None, None]:
    """
    Provides the external valuation client for a single request.

    Yields None when VALUATION_SERVICE_URL is not configured, which puts
    the estimator in fallback-only mode. The HTTP client is closed when
    the request ends.
    """
    settings = ValuationServiceSettings.from_env()
    if not settings.enabled:
        yield None
        return

    with build_valuation_client(settings) as client:
        yield HttpValuationService(client=client)


def get_estimate_valuation_use_case(
    valuation_service: ValuationService | None = Depends(get_valuation_service),
) -> EstimateValuation:
    return EstimateValuation(valuation_service=valuation_service)


def get_suggest_calculator_defaults_use_case(
    db: Session = Depends(get_db),
) -> SuggestCalculatorDefaults:
    """
    Factory for SuggestCalculatorDefaults wired to the catalog database.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
    """
    repository = PostgresCarCatalogRepository(session=db)
    return SuggestCalculatorDefaults(car_catalog_repository=repository)

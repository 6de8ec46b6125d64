from __future__ import annotations

from abc import ABC, abstractmethod

from carmarket_finance.domain.valuation import ValuationRequest, ValuationResult


class ValuationService(ABC):
    """
    Port for the external trade-in estimation service.

    Contract:
        - Returns the service's own figures, tagged with ValuationSource.SERVICE
        - Raises ValuationServiceUnavailable for any transport, status or
          payload failure; callers decide whether to fall back
    """

    @abstractmethod
    def estimate(self, request: ValuationRequest) -> ValuationResult: ...

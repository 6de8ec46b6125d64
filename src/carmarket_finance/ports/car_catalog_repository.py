from __future__ import annotations

from abc import ABC, abstractmethod

from carmarket_finance.domain.car import Car


class CarCatalogRepository(ABC):
    """
    Port for catalog data access.

    The calculators only read listings: a car's price, make, year and fuel
    type are enough to prefill every calculator.

    Contract:
        - car_id is validated as a UUID string by the calling use case
        - Unknown ids return None; raising is left to the use case
    """

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None:
        """
        Get a car by its identifier.

        Args:
            car_id: Car ID as a UUID string - pre-validated

        Returns:
            Car entity if found, None otherwise
        """
        ...

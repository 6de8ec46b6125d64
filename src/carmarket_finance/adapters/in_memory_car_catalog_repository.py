from __future__ import annotations

from carmarket_finance.domain.car import Car
from carmarket_finance.ports.car_catalog_repository import CarCatalogRepository


class InMemoryCarCatalogRepository(CarCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Indexes cars by id at construction
    - Returns None for unknown ids
    """

    def __init__(self, cars: list[Car]) -> None:
        self._cars_by_id = {car.id: car for car in cars}

    def get_by_id(self, car_id: str) -> Car | None:
        return self._cars_by_id.get(car_id)

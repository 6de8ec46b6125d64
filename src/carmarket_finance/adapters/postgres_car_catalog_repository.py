"""PostgreSQL implementation of CarCatalogRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from carmarket_finance.domain.car import Car
from carmarket_finance.infra.db.models.car import CarRow
from carmarket_finance.ports.car_catalog_repository import CarCatalogRepository


class PostgresCarCatalogRepository(CarCatalogRepository):
    """
    PostgreSQL implementation of CarCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Converts CarRow (infrastructure) to Car (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def get_by_id(self, car_id: str) -> Car | None:
        """
        Get car by ID.

        Args:
            car_id: Car ID (expected to be a valid UUID string)

        Returns:
            Car entity if found, None otherwise
        """
        try:
            key = UUID(car_id)
        except ValueError:
            return None

        query = select(CarRow).where(CarRow.id == key)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _to_domain(self, row: CarRow) -> Car:
        return Car(
            id=str(row.id),
            make=row.make,
            model=row.model,
            year=row.year,
            price=row.price,  # Already Decimal from NUMERIC column
            fuel_type=row.fuel_type,
            transmission=row.transmission,
            mileage_km=row.mileage_km,
        )

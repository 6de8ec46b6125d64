from carmarket_finance.infra.db.models.base import Base
from carmarket_finance.infra.db.models.car import CarRow

__all__ = ["Base", "CarRow"]

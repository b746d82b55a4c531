from .database import Base, engine, get_db, init_db
from .entities import TaxReturn

__all__ = [
    "Base",
    "engine",
    "get_db",
    "init_db",
    "TaxReturn",
]

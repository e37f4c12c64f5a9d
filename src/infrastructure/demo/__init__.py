"""Demo data package."""
from src.infrastructure.demo.catalog import DEMO_USER_ID, DemoCatalog

__all__ = ["DEMO_USER_ID", "DemoCatalog"]

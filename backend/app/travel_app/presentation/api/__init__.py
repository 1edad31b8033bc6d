# FastAPI routers - bundles, customers, health
from app.travel_app.presentation.api import bundles, customers, health

__all__ = ["bundles", "customers", "health"]

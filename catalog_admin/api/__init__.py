# Catalogue Admin API Routers
from .options import router as options_router

__all__ = ["options_router"]

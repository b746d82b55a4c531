from .tax import router as tax_router
from .tax_returns import router as tax_returns_router

__all__ = ["tax_router", "tax_returns_router"]

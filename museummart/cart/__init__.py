"""Cart package: session-scoped cart manager, schemas and routes."""

from .router import router as cart_router  # noqa: F401
from .store import CartManager  # noqa: F401

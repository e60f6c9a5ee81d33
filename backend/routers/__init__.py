# backend/routers/__init__.py

from .health import router as health_router
from .properties import router as properties_router

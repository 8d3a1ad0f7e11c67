"""API routers."""

from .events import router as events_router
from .sessions import router as sessions_router
from .submissions import router as submissions_router
from .settings import router as settings_router
from .imports import router as imports_router
from .export import router as export_router
from .stats import router as stats_router

__all__ = [
    "events_router",
    "sessions_router",
    "submissions_router",
    "settings_router",
    "imports_router",
    "export_router",
    "stats_router",
]

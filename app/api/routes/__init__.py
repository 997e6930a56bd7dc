from .chat import router as chat_router
from .dashboard import router as dashboard_router
__all__ = [
    "chat_router",
    "dashboard_router",
]

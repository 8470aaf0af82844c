"""Services layer"""

from .visualization_service import VisualizationSession, ChatMessage, ChatReply
from .session_registry import SessionRegistry
from .service_container import ServiceContainer

__all__ = [
    "VisualizationSession",
    "ChatMessage",
    "ChatReply",
    "SessionRegistry",
    "ServiceContainer",
]

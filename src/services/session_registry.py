"""Session registry - In-memory visualization sessions (single process, not persisted)"""

from typing import Dict, List, Optional

from models.config import AppConfig
from models.enums import LogCategory
from services.visualization_service import VisualizationSession
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SESSION)


class SessionRegistry:
    """Creates and looks up VisualizationSession instances by id"""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
        self._sessions: Dict[str, VisualizationSession] = {}

    def create(self) -> VisualizationSession:
        session = VisualizationSession(self.config)
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> VisualizationSession:
        """Raises KeyError when the session does not exist"""
        return self._sessions[session_id]

    def delete(self, session_id: str) -> None:
        """Raises KeyError when the session does not exist"""
        del self._sessions[session_id]
        log.info(f"Session deleted: {session_id}")

    def list_ids(self) -> List[str]:
        return list(self._sessions.keys())

    def __len__(self) -> int:
        return len(self._sessions)

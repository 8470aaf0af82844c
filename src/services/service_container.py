"""Service Container - Dependency injection container for all core services"""

from dataclasses import dataclass, field
from typing import Optional

from interpreter.command_interpreter import CommandInterpreter
from models.config import AppConfig
from services.session_registry import SessionRegistry


@dataclass
class ServiceContainer:
    """
    Centralized container for the services API endpoints need.

    Services included:
    - interpreter: Stateless command interpreter (threshold from config)
    - sessions: In-memory visualization sessions

    Usage:
        services = ServiceContainer.build(config_manager.load())
        set_service_container(services)

        @router.post("/commands/parse")
        async def parse(services: ServiceContainer = Depends(get_service_container)):
            return services.interpreter.parse(...)
    """

    config: AppConfig
    interpreter: CommandInterpreter
    sessions: SessionRegistry = field(default=None)

    def __post_init__(self):
        if self.sessions is None:
            self.sessions = SessionRegistry(self.config)

    @classmethod
    def build(cls, config: Optional[AppConfig] = None) -> "ServiceContainer":
        config = config or AppConfig()
        return cls(
            config=config,
            interpreter=CommandInterpreter(config.interpreter.clarification_threshold),
        )

"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the core Singleton services (Repositories, Initializer, Interpreter).
2. Wiring them together (e.g., injecting the Repositories into the TurnService).
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

Backends are picked from settings, so tests and local dev can run fully
in memory while deployments point at a database.
"""


from functools import lru_cache
from fastapi import Depends

from ..config import settings
from ..repositories.version import VersionRepository, StaticVersionRepository, SQLVersionRepository
from ..repositories.session import SessionRepository, InMemorySessionRepository, SQLSessionRepository
from ..execution.initializer import SessionInitializer
from ..execution.interpreter import DialogueInterpreter, PassthroughInterpreter
from ..services.turn import TurnService

# Version Repository (Singleton)
@lru_cache()
def get_version_repository() -> VersionRepository:
    if settings.VERSION_BACKEND == "sql":
        return SQLVersionRepository()
    return StaticVersionRepository()

# Session Repository (Singleton)
# Note: In-memory storage must be a singleton so data persists across requests!
@lru_cache()
def get_session_repository() -> SessionRepository:
    if settings.SESSION_BACKEND == "sql":
        return SQLSessionRepository()
    return InMemorySessionRepository()

# The Initializer (Singleton)
@lru_cache()
def get_session_initializer() -> SessionInitializer:
    return SessionInitializer(platform=settings.PLATFORM)

# The Interpreter (Singleton)
@lru_cache()
def get_interpreter() -> DialogueInterpreter:
    return PassthroughInterpreter()

# The Turn Service (Singleton Service)
@lru_cache()
def get_turn_service(
    session_repo: SessionRepository = Depends(get_session_repository),
    version_repo: VersionRepository = Depends(get_version_repository),
    initializer: SessionInitializer = Depends(get_session_initializer),
    interpreter: DialogueInterpreter = Depends(get_interpreter)
) -> TurnService:
    """
    Injects all necessary components into the TurnService.
    """
    return TurnService(
        session_repository=session_repo,
        version_repository=version_repo,
        initializer=initializer,
        interpreter=interpreter,
        error_speech=settings.ERROR_SPEECH,
    )

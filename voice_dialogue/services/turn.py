"""
Turn Service - Application Orchestration Layer

This service is the entry point for every inbound turn. It orchestrates
the interaction between the Data Layer (Repositories), the session
lifecycle (SessionInitializer), the interpreter and the API. It ensures
that session state is loaded, initialized, handed off, and saved correctly.
"""

import logging
from typing import Optional

from ..config import settings
from ..execution.context import DialogueContext
from ..execution.initializer import InitializationBranch, SessionInitializer
from ..execution.interpreter import DialogueInterpreter
from ..repositories.session import SessionRepository
from ..repositories.version import VersionRepository
from ..schemas.request import InboundRequest
from ..schemas.result import TurnResult, TurnStatus
from ..state.models import SessionState
from .exceptions import InitializationError

logger = logging.getLogger(__name__)

class TurnService:
    def __init__(
        self,
        session_repository: SessionRepository,
        version_repository: VersionRepository,
        initializer: SessionInitializer,
        interpreter: DialogueInterpreter,
        error_speech: str = settings.ERROR_SPEECH,
    ):
        self.session_repo = session_repository
        self.version_repo = version_repository
        self.initializer = initializer
        self.interpreter = interpreter
        self.error_speech = error_speech

    def get_session(self, user_id: str) -> Optional[SessionState]:
        """Retrieves a user's persisted state."""
        return self.session_repo.get(user_id)

    def delete_session(self, user_id: str) -> bool:
        """Deletes a user's persisted state."""
        return self.session_repo.delete(user_id)

    async def process_turn(self, version_id: str, request: InboundRequest) -> TurnResult:
        """
        The Turn Loop:
        1. Load (or create) Session State
        2. Initialize when the turn opens a session (or nothing is on the stack)
        3. Hand off to the Interpreter
        4. Save Session State
        5. Return the Turn Result
        """

        # 1. Load Session State
        state = self.session_repo.get_or_create(request.user_id)
        context = DialogueContext(
            version_id=version_id,
            state=state,
            version_repository=self.version_repo,
        )

        # 2. Initialize
        branch: Optional[InitializationBranch] = None
        if request.new_session or context.stack.is_empty():
            try:
                branch = await self.initializer.initialize(context, request)
            except InitializationError as e:
                # Nothing was mutated; the stored state stays as it was
                logger.error(f"Turn failed for user {request.user_id}: {e}")
                return TurnResult(status=TurnStatus.FAILED, speech=self.error_speech)

        # 3. Run the Interpreter
        await self.interpreter.run(context)

        # 4. Save Session State
        self.session_repo.save(state)

        # 5. Report
        active_frame = state.active_frame
        return TurnResult(
            status=TurnStatus.OK,
            speech=context.trace.spoken_text(),
            branch=branch,
            new_stack=context.turn.new_stack,
            current_diagram_id=active_frame.diagram_id if active_frame else None,
            stack_depth=context.stack.size(),
        )

"""
Initializer - Session Lifecycle Controller

The SessionInitializer runs when a turn opens a platform session. It
refreshes session storage and variables from the request and the published
version, then decides what the stack should look like before the
interpreter takes over.
-----------------------------------------------

The Branch Decision (first match wins):
1. RESTART: the stack is empty, the version asks for RESTART (or has no
    session settings at all), or a code block set the hidden 'resume'
    flag to False. The stack is replaced by a single root frame.
2. RESUME: the version asks for RESUME and supplies a resume prompt.
    The resume flow is pushed on top of the interrupted stack.
3. CONTINUE: anything else. The stack is kept as-is and the last spoken
    text of the top frame is repeated.

The version is fetched before anything is touched, so a fetch failure
leaves the session exactly as it was loaded.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from ..config import settings
from ..constants import FrameKey, StorageKey, VariableKey, VAR_SYSTEM
from ..domain.models import (
    RepeatType,
    SessionSettings,
    SessionType,
    StreamAction,
    Version,
)
from ..schemas.request import InboundRequest
from ..schemas.result import InitializationBranch
from ..services.exceptions import InitializationError, VersionNotFoundError
from ..state.models import Frame
from .context import DialogueContext
from .resume import create_resume_frame, is_resume_frame

logger = logging.getLogger(__name__)

# Neutral value bound to declared globals and slots until a flow sets them
DEFAULT_VARIABLE_VALUE = 0


class SessionInitializer:
    def __init__(self, platform: str = settings.PLATFORM):
        self.platform = platform

    async def initialize(
        self, context: DialogueContext, request: InboundRequest
    ) -> InitializationBranch:
        # 1. Fetch the metadata for this version (no mutation before this)
        try:
            version = await context.fetch_version()
        except (VersionNotFoundError, ValidationError) as e:
            raise InitializationError(
                f"Cannot initialize session for user {request.user_id}: {e}"
            ) from e

        # 2. Session Storage
        self._update_storage(context, request, version)

        # 3. Variables
        self._update_variables(context, request, version)

        # 4. Stream Interruption
        self._end_stream(context)

        # 5. Stack
        branch = self._prime_stack(context, version)
        logger.info(
            f"Initialized session for user {request.user_id} "
            f"(version={version.version_id}, branch={branch.value}, depth={context.stack.size()})"
        )
        return branch

    # ==========================================================================
    # Storage & Variables
    # ==========================================================================

    def _update_storage(
        self, context: DialogueContext, request: InboundRequest, version: Version
    ):
        storage = context.storage
        platform_settings = version.platform_data.settings

        storage.delete(StorageKey.STREAM_TEMP)

        # Count sessions, starting at 1
        if not storage.get(StorageKey.SESSIONS):
            storage.set(StorageKey.SESSIONS, 1)
        else:
            storage.update_in_place(StorageKey.SESSIONS, lambda count: count + 1)

        # Set based on the request; these may change under the same stack
        storage.set(StorageKey.LOCALE, request.locale)
        storage.set(StorageKey.USER, request.user_id)
        storage.set(StorageKey.SUPPORTED_INTERFACES, request.supported_interfaces)

        # Set based on metadata
        storage.set(
            StorageKey.PERMISSIONS,
            list(platform_settings.permissions) if platform_settings.permissions is not None else [],
        )
        storage.set(
            StorageKey.REPEAT,
            (platform_settings.repeat or RepeatType.ALL).value,
        )

    def _update_variables(
        self, context: DialogueContext, request: InboundRequest, version: Version
    ):
        storage = context.storage
        variables = context.variables

        system_vars: Dict[str, Any] = {
            "permissions": storage.get(StorageKey.PERMISSIONS),
            "capabilities": storage.get(StorageKey.SUPPORTED_INTERFACES),
            "events": [],
        }
        # A code block may have opted this user out of resuming
        previous = variables.get(VAR_SYSTEM)
        if isinstance(previous, dict) and "resume" in previous:
            system_vars["resume"] = previous["resume"]

        # System variables always reflect the current request
        variables.merge({
            VariableKey.TIMESTAMP: 0,
            VariableKey.LOCALE: storage.get(StorageKey.LOCALE),
            VariableKey.USER_ID: storage.get(StorageKey.USER),
            VariableKey.SESSIONS: storage.get(StorageKey.SESSIONS),
            VariableKey.PLATFORM: self.platform,
            VAR_SYSTEM: system_vars,
            VariableKey.SYSTEM_ENVELOPE: request.system,
        })

        # Globals and slots are seeded only where absent
        variables.initialize(version.variables, DEFAULT_VARIABLE_VALUE)
        variables.initialize(
            [slot.name for slot in version.platform_data.slots],
            DEFAULT_VARIABLE_VALUE,
        )

    def _end_stream(self, context: DialogueContext):
        storage = context.storage
        if not storage.get(StorageKey.STREAM_PLAY):
            return

        storage.update_in_place(
            StorageKey.STREAM_PLAY,
            lambda stream: {**stream, "action": StreamAction.END.value},
        )
        logger.debug("Ended active stream from previous session")

    # ==========================================================================
    # Branch Decision
    # ==========================================================================

    def _prime_stack(
        self, context: DialogueContext, version: Version
    ) -> InitializationBranch:
        session = version.platform_data.settings.session or SessionSettings(
            type=SessionType.RESTART
        )

        if self._should_restart(context, session):
            self._restart(context, version)
            return InitializationBranch.RESTART

        if session.type == SessionType.RESUME and session.resume:
            self._resume(context, session)
            return InitializationBranch.RESUME

        self._continue(context)
        return InitializationBranch.CONTINUE

    def _should_restart(self, context: DialogueContext, session: SessionSettings) -> bool:
        system_vars = context.variables.get(VAR_SYSTEM)
        resume_disabled = isinstance(system_vars, dict) and system_vars.get("resume") is False

        return (
            context.stack.is_empty()
            or session.type == SessionType.RESTART
            or resume_disabled
        )

    def _restart(self, context: DialogueContext, version: Version):
        # Start the stack with just the root flow
        context.stack.flush()
        context.stack.push(Frame(diagram_id=version.root_diagram_id))

        # The interpreter runs entry triggers only on a brand new stack
        context.turn.new_stack = True

    def _resume(self, context: DialogueContext, session: SessionSettings):
        stack = context.stack

        # Resume prompt flow - use command flow logic
        stack.top().storage.set(FrameKey.CALLED_COMMAND, True)

        # If there is an existing resume flow, remove it and anything above it
        resume_index = stack.find_index_of(is_resume_frame)
        if resume_index >= 0:
            stack.truncate_to(resume_index)

        stack.push(create_resume_frame(session.resume, session.follow))

    def _continue(self, context: DialogueContext):
        top = context.stack.top()

        # Stale marker from the previous turn
        top.storage.delete(FrameKey.CALLED_COMMAND)

        # Give context to where the user left off with the last speak block
        last_speak = top.storage.get(FrameKey.SPEAK)
        if last_speak is None:
            last_speak = ""
        context.storage.set(StorageKey.OUTPUT, last_speak)
        context.trace.speak(last_speak)

"""
Voice Dialogue Session Lifecycle

Session-lifecycle controller for a stack-based dialogue engine behind a
voice-assistant front end. Decides per new session whether to restart,
resume, or continue the conversation, and primes the execution stack,
session storage and variables accordingly.
"""

from voice_dialogue.domain import (
    PlatformSettings,
    Prompt,
    RepeatType,
    SessionSettings,
    SessionType,
    Slot,
    StreamAction,
    Version,
)
from voice_dialogue.state import (
    ExecutionStack,
    Frame,
    SessionState,
    SessionStorage,
    TurnState,
    VariableStore,
)
from voice_dialogue.schemas import InboundRequest, TurnResult, TurnStatus
from voice_dialogue.execution import (
    DialogueContext,
    InitializationBranch,
    SessionInitializer,
)

__all__ = [
    # Domain Layer
    "PlatformSettings",
    "Prompt",
    "RepeatType",
    "SessionSettings",
    "SessionType",
    "Slot",
    "StreamAction",
    "Version",
    # State Layer
    "ExecutionStack",
    "Frame",
    "SessionState",
    "SessionStorage",
    "TurnState",
    "VariableStore",
    # Schemas
    "InboundRequest",
    "TurnResult",
    "TurnStatus",
    # Execution Layer
    "DialogueContext",
    "InitializationBranch",
    "SessionInitializer",
]

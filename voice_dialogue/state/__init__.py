"""
State Layer - Runtime Data Models

Defines the runtime state model that tracks a user's position in the
dialogue, including the execution stack, session storage and variables.
"""

from voice_dialogue.state.models import (
    EmptyStackError,
    ExecutionStack,
    Frame,
    SessionState,
    TurnState,
)
from voice_dialogue.state.store import (
    SessionStorage,
    Store,
    VariableStore,
)

__all__ = [
    "EmptyStackError",
    "ExecutionStack",
    "Frame",
    "SessionState",
    "TurnState",
    "SessionStorage",
    "Store",
    "VariableStore",
]

"""
State Layer - Runtime Data Models

This module defines the runtime state model that tracks a user's position
in the dialogue. It implements a Call Stack pattern: every active flow
invocation is a Frame, the bottom frame is the root flow and the top frame
is the current point of execution.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional
from pydantic import BaseModel, Field

from .store import SessionStorage, Store, VariableStore


class EmptyStackError(Exception):
    """Raised when a frame is requested from an empty stack."""
    pass


class Frame(BaseModel):
    """
    Represents a single item on the call stack.
    """
    diagram_id: str = Field(frozen=True)

    # Frame-local state, discarded with the frame
    storage: Store = Field(default_factory=Store)
    variables: Store = Field(default_factory=Store)


class ExecutionStack(BaseModel):
    """
    Ordered frames, index 0 is the root.
    """
    frames: List[Frame] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.frames

    def size(self) -> int:
        return len(self.frames)

    def get_frames(self) -> List[Frame]:
        return list(self.frames)

    def get(self, index: int) -> Frame:
        return self.frames[index]

    def top(self) -> Frame:
        if not self.frames:
            raise EmptyStackError("Execution stack is empty.")
        return self.frames[-1]

    def push(self, frame: Frame) -> None:
        self.frames.append(frame)

    def pop(self) -> Frame:
        if not self.frames:
            raise EmptyStackError("Execution stack is empty.")
        return self.frames.pop()

    def flush(self) -> None:
        self.frames.clear()

    def find_index_of(self, predicate: Callable[[Frame], bool]) -> int:
        """
        Scans bottom-up and returns the index of the first matching frame,
        or -1 when none matches.
        """
        for index, frame in enumerate(self.frames):
            if predicate(frame):
                return index
        return -1

    def truncate_to(self, index: int) -> None:
        """
        Removes the frame at `index` and everything above it, leaving exactly
        `index` frames.
        """
        if index < 0 or index > len(self.frames):
            raise IndexError(f"Cannot truncate stack of size {len(self.frames)} to {index}.")
        del self.frames[index:]


class TurnState(BaseModel):
    """
    State that lives for a single turn only. Never persisted.
    """
    # Set when this turn replaced the stack with a fresh root frame
    new_stack: bool = False


class SessionState(BaseModel):
    """
    The persisted state for a single user.
    """
    user_id: str
    stack: ExecutionStack = Field(default_factory=ExecutionStack)
    storage: SessionStorage = Field(default_factory=SessionStorage)
    variables: VariableStore = Field(default_factory=VariableStore)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def active_frame(self) -> Optional[Frame]:
        if self.stack.is_empty():
            return None
        return self.stack.top()

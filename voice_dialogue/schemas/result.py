"""
Schemas - Turn Result

What the TurnService reports back once a turn has been initialized and
handed to the interpreter.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

class TurnStatus(str, Enum):
    """
    OK: The session was initialized (if needed) and the interpreter ran.
    FAILED: Initialization failed; the generic error speech is returned.
    """
    OK = "OK"
    FAILED = "FAILED"

class InitializationBranch(str, Enum):
    """Stack configuration chosen when a turn opens a session."""
    RESTART = "RESTART"
    RESUME = "RESUME"
    CONTINUE = "CONTINUE"

class TurnResult(BaseModel):
    status: TurnStatus
    speech: str = Field(
        "",
        description="Concatenated text of every speak trace emitted this turn."
    )
    branch: Optional[InitializationBranch] = Field(
        None,
        description="Set only when initialization ran this turn."
    )
    new_stack: bool = False
    current_diagram_id: Optional[str] = None
    stack_depth: int = 0

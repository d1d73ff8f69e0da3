"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from datetime import datetime
from typing import Optional, Any

from pydantic import BaseModel

from ..schemas.result import InitializationBranch


class TurnResponse(BaseModel):
    status: str
    speech: str
    branch: Optional[InitializationBranch] = None
    new_stack: bool = False
    current_diagram_id: Optional[str] = None
    stack_depth: int = 0


class FrameRead(BaseModel):
    diagram_id: str
    storage: dict[str, Any]
    variables: dict[str, Any]


class SessionRead(BaseModel):
    user_id: str
    stack: list[FrameRead]
    storage: dict[str, Any]
    variables: dict[str, Any]
    updated_at: datetime

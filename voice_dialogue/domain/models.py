"""
Domain Layer - Version Metadata Models

This module defines the static, published description of a voice project
("version") as returned by the version-fetch collaborator: the root flow,
the declared global variables and slots, and the platform settings that
drive session initialization.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SessionType(str, Enum):
    """
    How a new platform session treats the stack left behind by the last one.

    RESTART: Discard the stack and start over at the root flow.
    RESUME: Keep the stack and push the resume flow, which asks the user
        whether to pick up where they left off.
    CONTINUE: Keep the stack and repeat the last spoken text.
    """
    RESTART = "RESTART"
    RESUME = "RESUME"
    CONTINUE = "CONTINUE"


class RepeatType(str, Enum):
    OFF = "OFF"
    ALL = "ALL"
    DIALOG = "DIALOG"


class StreamAction(str, Enum):
    """Playback action recorded on a stream descriptor."""
    START = "START"
    RESUME = "RESUME"
    PAUSE = "PAUSE"
    END = "END"
    LOOP = "LOOP"
    NOEFFECT = "NOEFFECT"


class Prompt(BaseModel):
    """
    Spoken content with an optional voice.
    """
    content: str
    voice: Optional[str] = None


class SessionSettings(BaseModel):
    """
    Attributes:
        type: SessionType. CONTINUE when the object omits it.
        resume: Prompt spoken by the resume flow. RESUME needs it to apply.
        follow: Optional prompt spoken after the user chooses to resume.
    """
    type: SessionType = SessionType.CONTINUE
    resume: Optional[Prompt] = None
    follow: Optional[Prompt] = None


class PlatformSettings(BaseModel):
    """
    Any field may be omitted; the initializer applies documented defaults.
    """
    session: Optional[SessionSettings] = None
    repeat: Optional[RepeatType] = None
    permissions: Optional[List[str]] = None


class Slot(BaseModel):
    name: str
    type: Optional[str] = None


class PlatformData(BaseModel):
    settings: PlatformSettings = Field(default_factory=PlatformSettings)
    slots: List[Slot] = Field(default_factory=list)


class Version(BaseModel):
    """
    A published voice project.

    Attributes:
        version_id: Unique identifier.
        name: Human-readable name.
        root_diagram_id: Flow pushed as the root frame on restart.
        variables: Names of global variables declared by the project.
        platform_data: Platform settings and slot declarations.
    """
    version_id: str
    name: str
    root_diagram_id: str
    variables: List[str] = Field(default_factory=list)
    platform_data: PlatformData = Field(default_factory=PlatformData)

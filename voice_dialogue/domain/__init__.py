"""
Domain Layer - Version Metadata Models

Defines the static description of a published voice project: root flow,
declared variables and slots, and platform settings.
"""

from voice_dialogue.domain.models import (
    PlatformData,
    PlatformSettings,
    Prompt,
    RepeatType,
    SessionSettings,
    SessionType,
    Slot,
    StreamAction,
    Version,
)

__all__ = [
    "PlatformData",
    "PlatformSettings",
    "Prompt",
    "RepeatType",
    "SessionSettings",
    "SessionType",
    "Slot",
    "StreamAction",
    "Version",
]

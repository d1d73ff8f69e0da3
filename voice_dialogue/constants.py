"""
Storage, frame, and variable key constants.

Pure constants - no I/O. Use these instead of raw strings.
"""


class StorageKey:
    """Session-scoped storage keys."""

    SESSIONS = "sessions"
    LOCALE = "locale"
    USER = "user"
    SUPPORTED_INTERFACES = "supportedInterfaces"
    PERMISSIONS = "permissions"
    REPEAT = "repeat"
    OUTPUT = "output"
    STREAM_PLAY = "streamPlay"
    STREAM_TEMP = "streamTemp"


class FrameKey:
    """Frame-local storage keys."""

    CALLED_COMMAND = "calledCommand"
    SPEAK = "speak"


class VariableKey:
    """Built-in variable names."""

    TIMESTAMP = "timestamp"
    LOCALE = "locale"
    USER_ID = "user_id"
    SESSIONS = "sessions"
    PLATFORM = "platform"
    SYSTEM_ENVELOPE = "_system"


# Hidden system variables bag (code blocks only)
VAR_SYSTEM = "system"

"""Shared test fixtures for the session lifecycle test suite."""

from collections.abc import Callable
from typing import Any

import pytest

from voice_dialogue.domain.models import (
    PlatformData,
    PlatformSettings,
    Prompt,
    SessionSettings,
    SessionType,
    Slot,
    Version,
)
from voice_dialogue.execution.context import DialogueContext
from voice_dialogue.repositories.version import StaticVersionRepository
from voice_dialogue.schemas.request import InboundRequest
from voice_dialogue.state.models import SessionState


@pytest.fixture
def make_version() -> Callable[..., Version]:
    """Factory fixture for versions with a given session configuration.

    Usage:
        version = make_version(session=SessionSettings(type=SessionType.RESUME))
    """

    def _make(
        session: SessionSettings | None = None,
        permissions: list[str] | None = None,
        repeat: Any = None,
        variables: list[str] | None = None,
        slots: list[str] | None = None,
    ) -> Version:
        return Version(
            version_id="test_version",
            name="Test Version",
            root_diagram_id="root_flow",
            variables=variables if variables is not None else ["score"],
            platform_data=PlatformData(
                settings=PlatformSettings(
                    session=session,
                    permissions=permissions,
                    repeat=repeat,
                ),
                slots=[Slot(name=name) for name in (slots if slots is not None else ["city"])],
            ),
        )

    return _make


@pytest.fixture
def resume_session() -> SessionSettings:
    return SessionSettings(
        type=SessionType.RESUME,
        resume=Prompt(content="Pick up where you left off?", voice="Joanna"),
        follow=Prompt(content="Here we go."),
    )


@pytest.fixture
def inbound_request() -> InboundRequest:
    return InboundRequest(
        user_id="user-123",
        locale="en-US",
        supported_interfaces={"AudioPlayer": {}},
        system={"device": {"deviceId": "device-1"}},
    )


@pytest.fixture
def make_context() -> Callable[..., DialogueContext]:
    """Factory fixture wiring a version and a session state into a context."""

    def _make(version: Version, state: SessionState | None = None) -> DialogueContext:
        repository = StaticVersionRepository({version.version_id: version})
        return DialogueContext(
            version_id=version.version_id,
            state=state or SessionState(user_id="user-123"),
            version_repository=repository,
        )

    return _make

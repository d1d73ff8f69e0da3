"""Tests for TurnService."""

import pytest
from sqlmodel import create_engine

from voice_dialogue.constants import FrameKey
from voice_dialogue.execution.context import DialogueContext
from voice_dialogue.execution.initializer import InitializationBranch, SessionInitializer
from voice_dialogue.execution.interpreter import DialogueInterpreter, PassthroughInterpreter
from voice_dialogue.execution.resume import RESUME_DIAGRAM_ID
from voice_dialogue.repositories.session import InMemorySessionRepository
from voice_dialogue.repositories.version import SQLVersionRepository, StaticVersionRepository
from voice_dialogue.schemas.request import InboundRequest
from voice_dialogue.schemas.result import TurnStatus
from voice_dialogue.services.turn import TurnService
from voice_dialogue.state.models import Frame


class RecordingInterpreter(DialogueInterpreter):
    """Pushes a child flow that speaks, like a real flow would."""

    def __init__(self):
        self.new_stack_flags = []

    async def run(self, context: DialogueContext) -> None:
        self.new_stack_flags.append(context.turn.new_stack)
        if context.turn.new_stack:
            frame = Frame(diagram_id="story")
            frame.storage.set(FrameKey.SPEAK, "Once upon a time")
            context.stack.push(frame)
            context.trace.speak("Once upon a time")


@pytest.fixture
def session_repo() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def interpreter() -> RecordingInterpreter:
    return RecordingInterpreter()


@pytest.fixture
def service(session_repo, interpreter) -> TurnService:
    return TurnService(
        session_repository=session_repo,
        version_repository=StaticVersionRepository(),
        initializer=SessionInitializer(platform="alexa"),
        interpreter=interpreter,
        error_speech="Sorry, try again later.",
    )


def _request(new_session: bool = True) -> InboundRequest:
    return InboundRequest(user_id="user-9", locale="en-GB", new_session=new_session)


class TestProcessTurn:
    @pytest.mark.asyncio
    async def test_first_turn_restarts_and_saves(self, service, session_repo, interpreter):
        result = await service.process_turn("bedtime_stories", _request())

        assert result.status == TurnStatus.OK
        assert result.branch == InitializationBranch.RESTART
        assert result.new_stack is True
        assert result.speech == "Once upon a time"
        assert interpreter.new_stack_flags == [True]

        saved = session_repo.get("user-9")
        assert [f.diagram_id for f in saved.stack.get_frames()] == ["bedtime_stories_root", "story"]
        assert saved.storage.get("sessions") == 1

    @pytest.mark.asyncio
    async def test_second_session_resumes(self, service, session_repo):
        await service.process_turn("bedtime_stories", _request())

        result = await service.process_turn("bedtime_stories", _request())

        assert result.branch == InitializationBranch.RESUME
        assert result.new_stack is False
        assert result.current_diagram_id == RESUME_DIAGRAM_ID
        assert result.stack_depth == 3
        assert session_repo.get("user-9").storage.get("sessions") == 2

    @pytest.mark.asyncio
    async def test_continue_version_repeats_last_speak(self, service):
        await service.process_turn("daily_trivia", _request())
        result = await service.process_turn("daily_trivia", _request())

        assert result.branch == InitializationBranch.CONTINUE
        assert result.speech == "Once upon a time"
        assert result.stack_depth == 2

    @pytest.mark.asyncio
    async def test_mid_session_turn_skips_initialization(self, service, session_repo):
        await service.process_turn("bedtime_stories", _request())

        result = await service.process_turn("bedtime_stories", _request(new_session=False))

        assert result.branch is None
        assert session_repo.get("user-9").storage.get("sessions") == 1

    @pytest.mark.asyncio
    async def test_mid_session_turn_with_empty_stack_initializes(self, service):
        result = await service.process_turn("pizza_order", _request(new_session=False))
        assert result.branch == InitializationBranch.RESTART

    @pytest.mark.asyncio
    async def test_unknown_version_fails_without_saving(self, service, session_repo):
        result = await service.process_turn("missing", _request())

        assert result.status == TurnStatus.FAILED
        assert result.speech == "Sorry, try again later."
        assert session_repo.get("user-9") is None

    @pytest.mark.asyncio
    async def test_failure_keeps_existing_state(self, session_repo):
        service = TurnService(
            session_repository=session_repo,
            version_repository=StaticVersionRepository(),
            initializer=SessionInitializer(),
            interpreter=PassthroughInterpreter(),
        )
        await service.process_turn("pizza_order", _request())

        result = await service.process_turn("missing", _request())

        assert result.status == TurnStatus.FAILED
        assert session_repo.get("user-9").storage.get("sessions") == 1

    def test_get_and_delete_session(self, service, session_repo):
        assert service.get_session("user-9") is None
        assert service.delete_session("user-9") is False

    @pytest.mark.asyncio
    async def test_unreachable_version_store_fails_the_turn(self, session_repo):
        # No tables: every version query raises a database error
        service = TurnService(
            session_repository=session_repo,
            version_repository=SQLVersionRepository(engine=create_engine("sqlite://")),
            initializer=SessionInitializer(),
            interpreter=PassthroughInterpreter(),
            error_speech="Sorry, try again later.",
        )

        result = await service.process_turn("pizza_order", _request())

        assert result.status == TurnStatus.FAILED
        assert result.speech == "Sorry, try again later."
        assert result.branch is None
        assert session_repo.get("user-9") is None

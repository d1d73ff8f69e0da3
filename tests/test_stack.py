"""Tests for Frame and ExecutionStack."""

import pytest
from pydantic import ValidationError

from voice_dialogue.state.models import EmptyStackError, ExecutionStack, Frame, SessionState


def _stack(*diagram_ids: str) -> ExecutionStack:
    stack = ExecutionStack()
    for diagram_id in diagram_ids:
        stack.push(Frame(diagram_id=diagram_id))
    return stack


class TestFrame:
    def test_diagram_id_is_immutable(self):
        frame = Frame(diagram_id="root")
        with pytest.raises(ValidationError):
            frame.diagram_id = "other"

    def test_frames_own_their_storage(self):
        first = Frame(diagram_id="a")
        second = Frame(diagram_id="b")
        first.storage.set("speak", "Hi")
        assert second.storage.get("speak") is None


class TestStackOperations:
    def test_new_stack_is_empty(self):
        stack = ExecutionStack()
        assert stack.is_empty()
        assert stack.size() == 0

    def test_push_and_top(self):
        stack = _stack("root", "child")
        assert stack.top().diagram_id == "child"
        assert stack.size() == 2

    def test_pop_returns_top(self):
        stack = _stack("root", "child")
        assert stack.pop().diagram_id == "child"
        assert stack.top().diagram_id == "root"

    def test_top_on_empty_stack_raises(self):
        with pytest.raises(EmptyStackError):
            ExecutionStack().top()

    def test_pop_on_empty_stack_raises(self):
        with pytest.raises(EmptyStackError):
            ExecutionStack().pop()

    def test_flush_removes_everything(self):
        stack = _stack("root", "child")
        stack.flush()
        assert stack.is_empty()

    def test_get_frames_is_a_copy_of_the_sequence(self):
        stack = _stack("root")
        frames = stack.get_frames()
        frames.append(Frame(diagram_id="extra"))
        assert stack.size() == 1


class TestSearchAndTruncate:
    def test_find_index_of_returns_first_match_bottom_up(self):
        stack = _stack("root", "dup", "other", "dup")
        assert stack.find_index_of(lambda f: f.diagram_id == "dup") == 1

    def test_find_index_of_not_found(self):
        stack = _stack("root")
        assert stack.find_index_of(lambda f: f.diagram_id == "missing") == -1

    def test_truncate_to_removes_index_and_above(self):
        stack = _stack("a", "b", "c", "d")
        stack.truncate_to(1)
        assert [f.diagram_id for f in stack.get_frames()] == ["a"]

    def test_truncate_then_push_sits_above_previous_index(self):
        stack = _stack("a", "b", "c")
        stack.truncate_to(2)
        stack.push(Frame(diagram_id="new"))
        assert [f.diagram_id for f in stack.get_frames()] == ["a", "b", "new"]

    def test_truncate_to_zero_empties(self):
        stack = _stack("a", "b")
        stack.truncate_to(0)
        assert stack.is_empty()

    def test_truncate_out_of_range_raises(self):
        stack = _stack("a")
        with pytest.raises(IndexError):
            stack.truncate_to(5)


class TestSessionState:
    def test_active_frame(self):
        state = SessionState(user_id="u")
        assert state.active_frame is None
        state.stack.push(Frame(diagram_id="root"))
        assert state.active_frame.diagram_id == "root"

    def test_json_round_trip_keeps_frames(self):
        state = SessionState(user_id="u")
        frame = Frame(diagram_id="root")
        frame.storage.set("speak", "Hello")
        state.stack.push(frame)
        state.storage.set("sessions", 3)

        restored = SessionState.model_validate(state.model_dump(mode="json"))

        assert restored.stack.top().diagram_id == "root"
        assert restored.stack.top().storage.get("speak") == "Hello"
        assert restored.storage.get("sessions") == 3

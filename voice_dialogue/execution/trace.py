"""
Trace - Output Instructions Collected During a Turn

The output-rendering collaborator. The core only ever calls speak();
turning traces into a platform response is the response builder's job.
"""

import logging
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class TraceType(str, Enum):
    SPEAK = "speak"


class TraceFrame(BaseModel):
    type: TraceType
    payload: Dict[str, Any] = Field(default_factory=dict)


class Trace:
    def __init__(self):
        self._frames: List[TraceFrame] = []

    def add(self, frame: TraceFrame) -> None:
        self._frames.append(frame)

    def speak(self, text: str) -> None:
        """Fire-and-forget instruction to say `text`."""
        logger.debug(f"speak trace: {text!r}")
        self.add(TraceFrame(type=TraceType.SPEAK, payload={"message": text}))

    def get(self) -> List[TraceFrame]:
        return list(self._frames)

    def spoken_text(self) -> str:
        return " ".join(
            frame.payload["message"]
            for frame in self._frames
            if frame.type == TraceType.SPEAK and frame.payload.get("message")
        )

"""
Resume Flow

The synthetic flow pushed when a new session resumes an interrupted one.
It speaks the resume prompt, asks whether to continue, and on "yes" speaks
the optional follow prompt before popping back into the interrupted flow.
The prompts travel in the frame's own variables.
"""

from typing import Optional

from ..domain.models import Prompt
from ..state.models import Frame

# Reserved diagram identifier. Never collides with published flow ids.
RESUME_DIAGRAM_ID = "__RESUME_FLOW__"


class ResumeVariable:
    """Frame variable names read by the resume flow."""

    CONTENT = "__content0__"
    VOICE = "__voice0__"
    FOLLOW_CONTENT = "__content1__"
    FOLLOW_VOICE = "__voice1__"


def is_resume_frame(frame: Frame) -> bool:
    return frame.diagram_id == RESUME_DIAGRAM_ID


def create_resume_frame(resume: Prompt, follow: Optional[Prompt] = None) -> Frame:
    frame = Frame(diagram_id=RESUME_DIAGRAM_ID)
    frame.variables.set(ResumeVariable.CONTENT, resume.content)
    frame.variables.set(ResumeVariable.VOICE, resume.voice)
    frame.variables.set(ResumeVariable.FOLLOW_CONTENT, follow.content if follow else None)
    frame.variables.set(ResumeVariable.FOLLOW_VOICE, follow.voice if follow else None)
    return frame

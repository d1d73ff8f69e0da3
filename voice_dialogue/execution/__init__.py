"""
Execution Layer - Session Initialization and Turn Context

Defines the SessionInitializer (restart / resume / continue decision), the
per-turn DialogueContext, the resume flow helpers, and the interpreter
contract the primed stack is handed to.
"""

from voice_dialogue.execution.context import DialogueContext
from voice_dialogue.execution.initializer import InitializationBranch, SessionInitializer
from voice_dialogue.execution.interpreter import DialogueInterpreter, PassthroughInterpreter
from voice_dialogue.execution.resume import RESUME_DIAGRAM_ID, create_resume_frame
from voice_dialogue.execution.trace import Trace


__all__ = [
    "DialogueContext",
    "InitializationBranch",
    "SessionInitializer",
    "DialogueInterpreter",
    "PassthroughInterpreter",
    "RESUME_DIAGRAM_ID",
    "create_resume_frame",
    "Trace",
]

"""
Schemas - Turn Input and Output Models

Defines the normalized inbound request consumed by the session lifecycle
and the result reported once a turn has been processed.
"""

from voice_dialogue.schemas.request import InboundRequest
from voice_dialogue.schemas.result import InitializationBranch, TurnResult, TurnStatus

__all__ = [
    "InboundRequest",
    "InitializationBranch",
    "TurnResult",
    "TurnStatus",
]

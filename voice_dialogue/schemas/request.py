"""
Schemas - Inbound Turn Request

The slice of the platform request envelope the session lifecycle needs.
Parsing the raw envelope belongs to the platform SDK; callers hand us
this normalized shape.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

class InboundRequest(BaseModel):
    user_id: str = Field(
        ...,
        description="Platform user identifier. Session state is keyed by it."
    )
    locale: str = Field(
        ...,
        description="Locale of the device making the request, e.g. 'en-US'."
    )
    supported_interfaces: Optional[Dict[str, Any]] = Field(
        None,
        description="Device capability descriptor (display, audio player, ...). Null for headless devices."
    )
    system: Dict[str, Any] = Field(
        default_factory=dict,
        description="Raw platform 'System' context, exposed to code blocks as the '_system' variable."
    )
    new_session: bool = Field(
        True,
        description="True when this turn opens a platform session."
    )

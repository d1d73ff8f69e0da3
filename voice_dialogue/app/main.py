import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Depends, status
from fastapi.responses import Response

from .dependencies import get_turn_service
from ..config import settings
from ..infrastructure.database.connection import init_db
from ..schemas.request import InboundRequest
from ..services.turn import TurnService
from .schemas import FrameRead, SessionRead, TurnResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables when any SQL backend is configured
    if "sql" in (settings.SESSION_BACKEND, settings.VERSION_BACKEND):
        init_db()
    yield


app = FastAPI(title="Voice Dialogue Session Lifecycle", lifespan=lifespan)

# --- Endpoints ---

@app.post("/versions/{version_id}/turns", response_model=TurnResponse)
async def handle_turn(
    version_id: str,
    request: InboundRequest,
    service: TurnService = Depends(get_turn_service)
):
    """
    Runs one turn: initializes the session when needed and hands the
    primed stack to the interpreter. A failed initialization still
    returns 200 with the generic error speech.
    """
    result = await service.process_turn(version_id, request)

    # Explicitly Map: TurnResult (Service) -> TurnResponse (API)
    return TurnResponse(
        status=result.status.value,
        speech=result.speech,
        branch=result.branch,
        new_stack=result.new_stack,
        current_diagram_id=result.current_diagram_id,
        stack_depth=result.stack_depth,
    )


@app.get("/sessions/{user_id}", response_model=SessionRead)
def get_session(
    user_id: str,
    service: TurnService = Depends(get_turn_service)
):
    """Retrieves a user's persisted session state."""
    session = service.get_session(user_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")

    stack_dto = [
        FrameRead(
            diagram_id=frame.diagram_id,
            storage=frame.storage.to_dict(),
            variables=frame.variables.to_dict(),
        )
        for frame in session.stack.get_frames()
    ]

    return SessionRead(
        user_id=session.user_id,
        stack=stack_dto,
        storage=session.storage.to_dict(),
        variables=session.variables.to_dict(),
        updated_at=session.updated_at,
    )


@app.delete("/sessions/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    user_id: str,
    service: TurnService = Depends(get_turn_service)
):
    """
    Deletes a user's session state. Returns 204 No Content on success.
    """
    success = service.delete_session(user_id)
    if not success:
        raise HTTPException(status_code=404, detail="Session not found")

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)

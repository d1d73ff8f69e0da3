from abc import ABC, abstractmethod
from typing import Optional, Dict
from datetime import datetime, timezone

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

# Domain & Infra Imports
from ..state.models import SessionState
from ..infrastructure.database.tables import SessionDBModel
from ..infrastructure.database.connection import engine as default_engine


class SessionRepository(ABC):
    """
    Defines how the application accesses per-user session state.
    This allows us change how data is accessed (Memory -> SQL -> API) later
    without changing the SessionInitializer code.
    """

    @abstractmethod
    def get(self, user_id: str) -> Optional[SessionState]:
        """Retrieves the session state of a user."""
        pass

    @abstractmethod
    def save(self, session: SessionState):
        """Persists the session state (insert or update)."""
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Deletes a user's state. Returns True if found and deleted."""
        pass

    def get_or_create(self, user_id: str) -> SessionState:
        """Returns the stored state, or a fresh unsaved one with an empty stack."""
        session = self.get(user_id)
        if session is None:
            session = SessionState(user_id=user_id)
        return session


class InMemorySessionRepository(SessionRepository):
    """
    Uses in-memory dictionary for session storage for testing/dev purposes.
    """

    def __init__(self):
        self._store: Dict[str, SessionState] = {}

    def get(self, user_id: str) -> Optional[SessionState]:
        session = self._store.get(user_id)
        # Hand out copies so an aborted turn never leaks into the stored state
        return session.model_copy(deep=True) if session else None

    def save(self, session: SessionState):
        session.updated_at = datetime.now(timezone.utc)
        self._store[session.user_id] = session.model_copy(deep=True)

    def delete(self, user_id: str) -> bool:
        if user_id in self._store:
            del self._store[user_id]
            return True
        return False


class SQLSessionRepository(SessionRepository):
    """
    Session state stored as a JSON document (JSONB on PostgreSQL).
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or default_engine

    def get(self, user_id: str) -> Optional[SessionState]:
        with Session(self.engine) as db:
            statement = select(SessionDBModel).where(
                SessionDBModel.user_id == user_id
            )
            result = db.exec(statement).first()

            if not result:
                return None

            # Deserialize JSON back into Pydantic Domain Model
            session = SessionState.model_validate(result.state)

            # Inject the timestamp from the SQL column
            session.updated_at = result.updated_at

            return session

    def save(self, session: SessionState):
        session.updated_at = datetime.now(timezone.utc)
        with Session(self.engine) as db:
            statement = select(SessionDBModel).where(
                SessionDBModel.user_id == session.user_id
            )
            result = db.exec(statement).first()

            if result:
                # Update the JSON blob and the timestamp
                result.state = session.model_dump(mode="json")
                result.updated_at = session.updated_at
                db.add(result)
            else:
                db.add(
                    SessionDBModel(
                        user_id=session.user_id,
                        state=session.model_dump(mode="json"),
                        updated_at=session.updated_at,
                    )
                )
            db.commit()

    def delete(self, user_id: str) -> bool:
        with Session(self.engine) as db:
            statement = select(SessionDBModel).where(
                SessionDBModel.user_id == user_id
            )
            result = db.exec(statement).first()

            if result:
                db.delete(result)
                db.commit()
                return True
            return False

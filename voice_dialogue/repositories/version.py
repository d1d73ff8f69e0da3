from abc import ABC, abstractmethod
from typing import Dict, Optional

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..domain.models import Version
from ..infrastructure.database.tables import VersionDBModel
from ..infrastructure.database.connection import engine as default_engine
from ..data.hardcoded_versions import HARDCODED_VERSIONS
from ..services.exceptions import VersionNotFoundError


# The Interface
class VersionRepository(ABC):
    """
    The version-fetch collaborator.
    Supplies the published metadata (settings, slots, globals, root flow)
    the session initializer needs once per turn.
    """

    @abstractmethod
    async def get_version(self, version_id: str) -> Version:
        """
        Retrieves a version by ID.
        Raises VersionNotFoundError if it is missing or its data is invalid.
        """
        pass


class StaticVersionRepository(VersionRepository):
    """
    Get versions from a hardcoded list in memory.
    """

    def __init__(self, versions: Optional[Dict[str, Version]] = None):
        # Index for O(1) lookup
        self._index: Dict[str, Version] = HARDCODED_VERSIONS if versions is None else versions

    async def get_version(self, version_id: str) -> Version:
        if version_id not in self._index:
            raise VersionNotFoundError(f"Version '{version_id}' not found.")
        # Callers must not mutate the shared definition
        return self._index[version_id].model_copy(deep=True)


class SQLVersionRepository(VersionRepository):
    """
    Reads from the 'versions' table (JSON document per version).
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or default_engine

    async def get_version(self, version_id: str) -> Version:
        try:
            with Session(self.engine) as db:
                statement = select(VersionDBModel).where(
                    VersionDBModel.version_id == version_id
                )
                result = db.exec(statement).first()
        except SQLAlchemyError as e:
            raise VersionNotFoundError(f"Version '{version_id}' could not be fetched: {e}") from e

        if not result:
            raise VersionNotFoundError(f"Version '{version_id}' not found in database.")

        # Deserialize JSON -> Pydantic
        try:
            return Version.model_validate(result.version_data)
        except ValidationError as e:
            raise VersionNotFoundError(f"Version '{version_id}' has invalid data: {e}") from e

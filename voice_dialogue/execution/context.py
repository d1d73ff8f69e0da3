"""
Dialogue Context

Everything one turn operates on: the persisted session state, the
turn-scoped state, the output trace, and access to the version metadata.
A context is built per turn and never shared between sessions.
"""

from ..domain.models import Version
from ..repositories.version import VersionRepository
from ..state.models import ExecutionStack, SessionState, TurnState
from ..state.store import SessionStorage, VariableStore
from .trace import Trace


class DialogueContext:
    def __init__(
        self,
        version_id: str,
        state: SessionState,
        version_repository: VersionRepository,
    ):
        self.version_id = version_id
        self.state = state
        self.version_repository = version_repository
        self.turn = TurnState()
        self.trace = Trace()

    @property
    def stack(self) -> ExecutionStack:
        return self.state.stack

    @property
    def storage(self) -> SessionStorage:
        return self.state.storage

    @property
    def variables(self) -> VariableStore:
        return self.state.variables

    async def fetch_version(self) -> Version:
        return await self.version_repository.get_version(self.version_id)

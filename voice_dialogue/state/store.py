"""
State Layer - Key/Value Stores

Dynamic value bags shared by the session, its frames, and flow evaluation.
Values must stay JSON-compatible so the whole SessionState can be persisted
as a single JSON document.

Two distinct write paths exist on purpose:
- VariableStore.initialize: seed a default only where a name is absent.
- VariableStore.merge: always overwrite with the current turn's truth.
"""

import copy
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field


class Store(BaseModel):
    """
    A plain string-keyed mapping. Absent keys are a valid state, not an error.
    """
    data: Dict[str, Any] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self.data

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self.data.keys())

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.data)


class SessionStorage(Store):
    """
    Session-scoped storage (counters, locale, user, device capabilities,
    permissions, last output, stream descriptors).
    """

    def update_in_place(
        self,
        key: str,
        transform: Callable[[Any], Any],
        default: Optional[Any] = None,
    ) -> Any:
        """
        Read-modify-write of a single entry.

        `transform` receives a deep copy of the current value (or `default`
        when the key is absent) and must return the new value, which is then
        stored and returned. Not synchronized: one session is never mutated
        by two turns at once.
        """
        current = copy.deepcopy(self.data.get(key, default))
        updated = transform(current)
        self.data[key] = updated
        return updated


class VariableStore(Store):
    """
    Variables visible to flow evaluation.
    """

    def initialize(self, names: Iterable[str], default_value: Any = 0) -> None:
        """Bind every name not already present to a copy of `default_value`."""
        for name in names:
            if name not in self.data:
                self.data[name] = copy.deepcopy(default_value)

    def merge(self, bindings: Dict[str, Any]) -> None:
        """Overwrite (or create) every binding in `bindings`."""
        self.data.update(bindings)

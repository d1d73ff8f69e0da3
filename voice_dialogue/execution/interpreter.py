"""
Interpreter Interface.

Defines the contract for the flow interpreter - the component that runs
diagrams once the session initializer has primed the stack.
"""
from abc import ABC, abstractmethod

from .context import DialogueContext

class DialogueInterpreter(ABC):
    @abstractmethod
    async def run(self, context: DialogueContext) -> None:
        """
        Executes from the top frame of context.stack until the turn yields.
        context.turn.new_stack tells whether entry triggers should run.
        """
        pass


class PassthroughInterpreter(DialogueInterpreter):
    """
    Temporary Stub: leaves the primed stack untouched, so the turn's output
    is whatever the initializer traced.
    """
    async def run(self, context: DialogueContext) -> None:
        return None

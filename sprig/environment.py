from typing import Any, Dict, Optional
from sprig.errors import SprigRuntimeError


class Environment:
    """A scope mapping names to values, with a link to the enclosing scope.

    The enclosing scope is borrowed, never owned: it always belongs to a
    caller further up the execution stack and outlives this one.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # Re-declaring a name in the same scope replaces the binding
        self.values[name] = value

    def get(self, name: str) -> Any:
        if name in self.values:
            return self.values[name]
        if self.parent is not None:
            return self.parent.get(name)
        raise SprigRuntimeError(f"Undefined variable '{name}'")

    def assign(self, name: str, value: Any):
        # Update the innermost scope that binds the name; never create one
        if name in self.values:
            self.values[name] = value
            return
        if self.parent is not None:
            self.parent.assign(name, value)
            return
        raise SprigRuntimeError(f"Undefined variable '{name}'")

    def depth(self) -> int:
        """Number of enclosing scopes above this one."""
        return 0 if self.parent is None else 1 + self.parent.depth()


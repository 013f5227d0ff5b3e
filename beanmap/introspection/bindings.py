"""Property bindings discovered on a bean class."""

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class AccessorBinding:
    """A zero-argument read method exposing a property."""
    property_name: str
    method_name: str
    method: Callable[..., Any]
    declared_type: Optional[Any] = None

    def read(self, bean: Any) -> Any:
        return self.method(bean)


@dataclass(frozen=True)
class MutatorBinding:
    """A single-argument write method for a property."""
    property_name: str
    method_name: str
    method: Callable[..., Any]
    declared_type: Optional[Any] = None

    def write(self, bean: Any, value: Any) -> None:
        self.method(bean, value)

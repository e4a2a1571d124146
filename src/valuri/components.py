"""src/valuri/components.py

Names of the URI components and helpers to coerce user supplied names.
"""

from enum import Enum
from typing import FrozenSet, Iterable, Tuple, Union

from valuri.exceptions import InvalidComponentError

__all__ = [
    "Component",
    "ComponentName",
    "ALL_COMPONENTS",
    "as_component",
    "as_components",
]


class Component(str, Enum):
    """The eight named parts of a URI."""

    SCHEME = "scheme"
    USER = "user"
    PASS = "pass"
    HOST = "host"
    PORT = "port"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"

    def __str__(self) -> str:
        return self.value


ComponentName = Union[Component, str]

# Canonical order, also the default selection when formatting.
ALL_COMPONENTS: Tuple[Component, ...] = tuple(Component)


def as_component(name: ComponentName) -> Component:
    """
    Return the Component for a member or its string value.

    Raises:
        InvalidComponentError: If ``name`` is not a known component.
    """
    if isinstance(name, Component):
        return name
    try:
        return Component(name)
    except ValueError:
        raise InvalidComponentError(name) from None


def as_components(names: Iterable[ComponentName]) -> FrozenSet[Component]:
    """Coerce an iterable of names into a set of components."""
    if isinstance(names, (str, bytes)):
        # A single name, not an iterable of one-letter names.
        return frozenset((as_component(names),))
    return frozenset(as_component(name) for name in names)

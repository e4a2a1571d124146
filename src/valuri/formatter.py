"""src/valuri/formatter.py

Rebuild URI strings from a selection of components.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from valuri.components import (
    ALL_COMPONENTS,
    Component,
    ComponentName,
    as_component,
    as_components,
)
from valuri.host import classify_host

__all__ = ["format_components"]


def _resolve(
    fields: Mapping[Component, Any],
    selected: Iterable[Component],
    overrides: Mapping[Component, Any],
) -> Dict[Component, Any]:
    resolved: Dict[Component, Any] = {}
    for component in selected:
        value = overrides.get(component)
        if value is None:
            value = fields.get(component)
        elif component is Component.HOST:
            value, _ = classify_host(value)
        resolved[component] = value
    return resolved


def format_components(
    fields: Mapping[Component, Any],
    components: Optional[Iterable[ComponentName]] = None,
    overrides: Optional[Mapping[ComponentName, Any]] = None,
) -> str:
    """
    Construct a URI string from stored component values.

    Args:
        fields: Stored values keyed by component. The host must already be
            in canonical form.
        components: Names of the components to include. Defaults to all.
        overrides: Values to use instead of the stored ones for this call.
            An overridden host is classified again so IPv6 literals come
            out bracketed. None values fall back to the stored value.

    Returns:
        The URI string. Components that are not selected or resolve to
        None are left out together with their separators.

    Raises:
        InvalidComponentError: If a name in ``components`` or ``overrides``
            is not a URI component.
    """
    selected = ALL_COMPONENTS if components is None else as_components(components)
    replacements = {as_component(name): value for name, value in (overrides or {}).items()}
    values = _resolve(fields, selected, replacements)

    parts: List[str] = []

    scheme = values.get(Component.SCHEME)
    if scheme is not None:
        parts.append(f"{scheme}:")

    host = values.get(Component.HOST)
    if host is not None:
        parts.append("//")
        user = values.get(Component.USER)
        if user is not None:
            parts.append(str(user))
            password = values.get(Component.PASS)
            if password is not None:
                parts.append(f":{password}")
            parts.append("@")
        parts.append(str(host))
        port = values.get(Component.PORT)
        if port is not None:
            parts.append(f":{port}")

    path = values.get(Component.PATH)
    if path is not None:
        parts.append(str(path))

    query = values.get(Component.QUERY)
    if query is not None:
        parts.append(f"?{query}")

    fragment = values.get(Component.FRAGMENT)
    if fragment is not None:
        parts.append(f"#{fragment}")

    return "".join(parts)

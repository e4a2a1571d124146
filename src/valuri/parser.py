"""src/valuri/parser.py

Split URI strings into their named components.
"""

import logging
import urllib.parse
from typing import Any, Dict, Optional

from valuri.components import Component
from valuri.exceptions import InvalidUriError

__all__ = ["parse_components"]

logger = logging.getLogger(__name__)


def _raw_host(netloc: str) -> Optional[str]:
    """
    Extract the host from a netloc, keeping its case and IPv6 brackets.

    ``SplitResult.hostname`` lower-cases the host and drops the brackets,
    both of which must survive a parse/format round trip.
    """
    _, _, hostinfo = netloc.rpartition("@")
    _, have_open_br, bracketed = hostinfo.partition("[")
    if have_open_br:
        host, _, _ = bracketed.partition("]")
        return f"[{host}]"
    host, _, _ = hostinfo.partition(":")
    return host or None


def _raw_scheme(uri: str, scheme: str) -> Optional[str]:
    """Recover the scheme as written; ``urlsplit`` lower-cases it."""
    if not scheme:
        return None
    head, _, _ = uri.partition(":")
    # urlsplit drops leading spaces and any tab or newline
    head = "".join(head.split())
    return head if head.lower() == scheme else scheme


def parse_components(uri: str) -> Dict[Component, Any]:
    """
    Parse a URI string into a mapping of component to value.

    Absent components (including empty ones) map to None.

    Args:
        uri: URI string to parse.

    Returns:
        Mapping holding all eight components.

    Raises:
        InvalidUriError: If the string cannot be split, has an invalid
            port, an authority without a host, or no component at all.
    """
    if not isinstance(uri, str):
        logger.debug("Refusing to parse non-string URI %r", uri)
        raise InvalidUriError(uri)

    try:
        parsed = urllib.parse.urlsplit(uri)
        port = parsed.port
    except ValueError as exc:
        logger.debug("Unable to parse URI %r: %s", uri, exc)
        raise InvalidUriError(uri) from exc

    host = _raw_host(parsed.netloc)
    if parsed.netloc and host is None:
        logger.debug("URI %r has an authority without a host", uri)
        raise InvalidUriError(uri)

    components: Dict[Component, Any] = {
        Component.SCHEME: _raw_scheme(uri, parsed.scheme),
        Component.USER: parsed.username or None,
        Component.PASS: parsed.password or None,
        Component.HOST: host,
        Component.PORT: port,
        Component.PATH: parsed.path or None,
        Component.QUERY: parsed.query or None,
        Component.FRAGMENT: parsed.fragment or None,
    }

    if all(value is None for value in components.values()):
        logger.debug("URI %r has no components", uri)
        raise InvalidUriError(uri)

    return components

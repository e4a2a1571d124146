"""src/valuri/host.py

Host classification for Valuri.

Every host falls into exactly one of four types: absent, an IPv4 literal,
an IPv6 literal or a name. IPv6 literals are always stored and emitted in
their bracketed form, whether or not the input carried the brackets.
"""

import ipaddress
import logging
from enum import IntFlag
from typing import Optional, Tuple

__all__ = ["HostType", "classify_host", "is_ip"]

logger = logging.getLogger(__name__)


class HostType(IntFlag):
    """
    Type of the host component.

    ``IP`` is a flag shared by ``IPV4`` and ``IPV6`` and is never assigned on
    its own, so ``host_type & HostType.IP`` tells whether the host is an IP
    literal of either family.
    """

    NONE = 0
    IP = 0b0001
    IPV4 = 0b0011
    IPV6 = 0b0101
    NAME = 0b1000


def is_ip(host_type: HostType) -> bool:
    """Return True for IPv4 and IPv6 hosts."""
    return bool(host_type & HostType.IP)


def _is_ipv4(text: str) -> bool:
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def _is_ipv6(text: str) -> bool:
    # Zone identifiers (fe80::1%eth0) are not accepted as literals.
    if "%" in text:
        return False
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def _strip_brackets(text: str) -> str:
    if text.startswith("[") and text.endswith("]"):
        return text[1:-1]
    return text


def classify_host(raw_host: Optional[str]) -> Tuple[Optional[str], HostType]:
    """
    Classify a host and return it in canonical form.

    Args:
        raw_host: Host as found in a URI, with or without IPv6 brackets.

    Returns:
        ``(canonical_host, host_type)``. IPv4 literals and names are
        returned unchanged; IPv6 literals are wrapped in square brackets.
        Never raises: anything that is not an IP literal is a name.
    """
    if raw_host is None:
        return None, HostType.NONE

    text = str(raw_host)
    if _is_ipv4(text):
        result = (raw_host, HostType.IPV4)
    else:
        address = _strip_brackets(text)
        if _is_ipv6(address):
            result = (f"[{address}]", HostType.IPV6)
        else:
            result = (raw_host, HostType.NAME)

    logger.debug("Classified host %r as %s", raw_host, result[1].name)
    return result

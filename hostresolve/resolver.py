"""Resolve a hostname to the first address the system resolver reports."""

import socket

UNHANDLED_ADDRESS = "UNHANDELED"


class LookupFailure(Exception):
    """Raised when a hostname cannot be resolved."""

    def __init__(self, hostname, reason):
        super().__init__(f"Error looking up Address: {reason}")
        self.hostname = hostname
        self.reason = reason


def first_address(hostname):
    """Return the first address found for ``hostname`` as a string.

    An IPv4 address is returned in dotted form; any other address family
    yields the marker ``UNHANDELED``.
    """
    try:
        results = socket.getaddrinfo(hostname, None)
    except (socket.gaierror, UnicodeError) as exc:
        raise LookupFailure(hostname, str(exc)) from exc
    if not results:
        return ""
    family, _type, _proto, _canonname, sockaddr = results[0]
    if family == socket.AF_INET:
        return sockaddr[0]
    return UNHANDLED_ADDRESS
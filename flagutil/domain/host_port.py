import re
from typing import Tuple

from flagutil.domain.errors import InvalidAddressError

_PORT = re.compile(r"[0-9]+|[A-Za-z][A-Za-z0-9_-]*")


def split_host_port(hostport: str) -> Tuple[str, str]:
    """Split "host:port", "[host]:port" or "[host%zone]:port" into host and port.

    Follows the usual net.SplitHostPort rules: the port is after the last
    colon, and a host containing colons must be bracketed.
    """

    def fail(detail: str) -> InvalidAddressError:
        return InvalidAddressError(hostport, detail)

    i = hostport.rfind(":")
    if i < 0:
        raise fail("missing port in address")

    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise fail("missing ']' in address")
        if end + 1 == len(hostport):
            raise fail("missing port in address")
        if end + 1 != i:
            # either "[host]:port:extra" or "[host]extra:port"
            if hostport[end + 1] == ":":
                raise fail("too many colons in address")
            raise fail("missing port in address")
        host = hostport[1:end]
        j, k = 1, end + 1
    else:
        host = hostport[:i]
        if ":" in host:
            raise fail("too many colons in address")
        j = k = 0

    if "[" in hostport[j:]:
        raise fail("unexpected '[' in address")
    if "]" in hostport[k:]:
        raise fail("unexpected ']' in address")

    return host, hostport[i + 1 :]


def validate_address(hostport: str) -> str:
    """Return `hostport` unchanged if it has a non-empty host and a usable port."""
    host, port = split_host_port(hostport)
    if not host:
        raise InvalidAddressError(hostport, "missing host in address")
    if not port:
        raise InvalidAddressError(hostport, "missing port in address")
    if not _PORT.fullmatch(port):
        raise InvalidAddressError(hostport, "invalid port")
    return hostport

import re
from dataclasses import dataclass
from urllib.parse import SplitResult, urlsplit

from flagutil.domain.errors import InvalidURLError

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class ParsedURL:
    """A parsed URL that renders back to exactly the text it was parsed from.

    Component attributes (scheme, netloc, path, query, fragment, hostname,
    port, ...) are read from the underlying SplitResult.
    """

    raw: str
    parts: SplitResult

    def geturl(self) -> str:
        return self.raw

    def __getattr__(self, name):
        if name in ("raw", "parts"):
            raise AttributeError(name)
        return getattr(self.parts, name)

    def __str__(self) -> str:
        return self.raw


def parse_url(raw: str) -> ParsedURL:
    """Parse `raw` into a ParsedURL, rejecting strings that are not well-formed URLs.

    Relative references ("/path", "host/path") are accepted; a leading colon,
    control characters, broken percent escapes, a colon in the first path
    segment of a scheme-less reference, whitespace in the host, a malformed
    IPv6 host or an out-of-range port are not.
    """
    if _CONTROL_CHARS.search(raw):
        raise InvalidURLError(raw, "invalid control character in URL")
    if raw.startswith(":"):
        raise InvalidURLError(raw, "missing protocol scheme")

    bad = _BAD_ESCAPE.search(raw)
    if bad:
        raise InvalidURLError(raw, f'invalid URL escape "{raw[bad.start():bad.start() + 3]}"')

    try:
        parts = urlsplit(raw)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as exc:
        raise InvalidURLError(raw, str(exc)) from exc

    # urlsplit drops leading whitespace, so " http://a" still yields a scheme
    has_scheme = bool(parts.scheme) and not raw[:1].isspace()
    if not has_scheme and not raw.startswith("//"):
        rest = raw.split("#", 1)[0].split("?", 1)[0]
        if ":" in rest.split("/", 1)[0]:
            raise InvalidURLError(raw, "first path segment in URL cannot contain colon")

    if " " in parts.netloc:
        raise InvalidURLError(raw, 'invalid character " " in host name')

    return ParsedURL(raw, parts)


def host_of(url: ParsedURL) -> str:
    """Host with port, without userinfo: "user@example.com:80" -> "example.com:80"."""
    return url.netloc.rpartition("@")[2]

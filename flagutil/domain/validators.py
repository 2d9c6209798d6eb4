from datetime import timedelta
from typing import Protocol, TypeVar

from flagutil.domain.duration import format_duration, parse_duration
from flagutil.domain.host_port import validate_address
from flagutil.domain.url import ParsedURL, parse_url

T = TypeVar("T")


class ElementValidator(Protocol[T]):
    """Converts one raw substring into an element and renders it back.

    `convert` raises a FlagValueError subclass when the substring is invalid.
    """

    def convert(self, raw: str) -> T: ...

    def render(self, value: T) -> str: ...


class PassThroughValidator:
    def convert(self, raw: str) -> str:
        return raw

    def render(self, value: str) -> str:
        return value


class AddressValidator:
    """Accepts "host:port" and "[ipv6]:port"; the stored element is the raw string."""

    def convert(self, raw: str) -> str:
        return validate_address(raw)

    def render(self, value: str) -> str:
        return value


class URLValidator:
    def convert(self, raw: str) -> ParsedURL:
        return parse_url(raw)

    def render(self, value: ParsedURL) -> str:
        return value.geturl()


class DurationValidator:
    def convert(self, raw: str) -> timedelta:
        return parse_duration(raw)

    def render(self, value: timedelta) -> str:
        return format_duration(value)

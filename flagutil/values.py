"""Concrete flag value types built on ListValue / ScalarValue."""

from datetime import timedelta
from typing import Iterable, Optional

from flagutil.domain.host_port import split_host_port
from flagutil.domain.list_value import DEFAULT_DELIMITER, ListValue
from flagutil.domain.scalar_value import ScalarValue
from flagutil.domain.url import ParsedURL, host_of
from flagutil.domain.validators import (
    AddressValidator,
    DurationValidator,
    PassThroughValidator,
    URLValidator,
)


class Strings(ListValue[str]):
    """Comma-separated list of strings, no validation."""

    def __init__(self, values: Optional[Iterable[str]] = None, delimiter: str = DEFAULT_DELIMITER):
        super().__init__(PassThroughValidator(), values, delimiter)


class NetworkAddresses(ListValue[str]):
    """Comma-separated list of "host:port" strings."""

    def __init__(self, values: Optional[Iterable[str]] = None, delimiter: str = DEFAULT_DELIMITER):
        super().__init__(AddressValidator(), values, delimiter)


ListenAddresses = NetworkAddresses


class URLs(ListValue[ParsedURL]):
    """Comma-separated list of URLs, each stored as a ParsedURL."""

    def __init__(
        self, values: Optional[Iterable[ParsedURL]] = None, delimiter: str = DEFAULT_DELIMITER
    ):
        super().__init__(URLValidator(), values, delimiter)


class Durations(ListValue[timedelta]):
    def __init__(
        self, values: Optional[Iterable[timedelta]] = None, delimiter: str = DEFAULT_DELIMITER
    ):
        super().__init__(DurationValidator(), values, delimiter)


class NetworkAddress(ScalarValue[str]):
    def __init__(self):
        super().__init__(AddressValidator())

    @property
    def host(self) -> str:
        return split_host_port(self.value)[0] if self.is_valid() else ""

    @property
    def port(self) -> str:
        return split_host_port(self.value)[1] if self.is_valid() else ""


class URL(ScalarValue[ParsedURL]):
    """A single URL; `is_valid()` tells whether one was parsed."""

    def __init__(self):
        super().__init__(URLValidator())

    @property
    def url(self) -> Optional[ParsedURL]:
        return self.value

    @property
    def scheme(self) -> str:
        return self.value.scheme if self.is_valid() else ""

    @property
    def host(self) -> str:
        return host_of(self.value) if self.is_valid() else ""

    @property
    def path(self) -> str:
        return self.value.path if self.is_valid() else ""


class Duration(ScalarValue[timedelta]):
    def __init__(self):
        super().__init__(DurationValidator())

    @property
    def duration(self) -> timedelta:
        return self.value if self.is_valid() else timedelta(0)

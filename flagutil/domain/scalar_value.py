from typing import Generic, Optional, TypeVar

from flagutil.domain.validators import ElementValidator

T = TypeVar("T")


class ScalarValue(Generic[T]):
    """Value object holding a single validated flag value.

    `set` validates the whole raw string and replaces the held value. On
    failure the previous value (and `is_valid()`) are left as they were.
    """

    def __init__(self, validator: ElementValidator[T]):
        self._validator = validator
        self.value: Optional[T] = None
        self._parsed = False

    @classmethod
    def from_raw_string(cls, text: str, **kwargs) -> "ScalarValue[T]":
        value = cls(**kwargs)
        value.set(text)
        return value

    def set(self, raw: str) -> None:
        self.value = self._validator.convert(raw)
        self._parsed = True

    def is_valid(self) -> bool:
        return self._parsed

    def __str__(self) -> str:
        if not self._parsed:
            return ""
        return self._validator.render(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, ScalarValue):
            return self._parsed == other._parsed and self.value == other.value
        return NotImplemented

    __hash__ = None  # mutable

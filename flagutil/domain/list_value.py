import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from flagutil.domain.errors import FlagValueError
from flagutil.domain.validators import ElementValidator

T = TypeVar("T")

DEFAULT_DELIMITER = ","

logger = logging.getLogger(__name__)


class ListValue(Generic[T]):
    """Value object for an ordered list parsed from a delimited flag string.

    - splits by a fixed delimiter (comma by default)
    - every substring, empty ones included, goes through the element validator
    - preserves input order, no deduplication
    - each `set` call appends, so a repeated flag accumulates

    A failing substring stops `set` with the validator's error. Elements
    accepted before it in the same call stay appended.

    Not safe for concurrent `set` calls on the same instance.
    """

    def __init__(
        self,
        validator: ElementValidator[T],
        values: Optional[Iterable[T]] = None,
        delimiter: str = DEFAULT_DELIMITER,
    ):
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self._validator = validator
        self._delimiter = delimiter
        self.values: List[T] = list(values) if values is not None else []

    @classmethod
    def from_raw_string(cls, text: str, **kwargs) -> "ListValue[T]":
        value = cls(**kwargs)
        value.set(text)
        return value

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def set(self, raw: str) -> None:
        for part in raw.split(self._delimiter):
            try:
                element = self._validator.convert(part)
            except FlagValueError as e:
                logger.debug(f"rejected element {part!r} of {raw!r}: {e}")
                raise
            self.values.append(element)

    def strings(self) -> List[str]:
        return [self._validator.render(v) for v in self.values]

    def to_list(self) -> List[T]:
        return list(self.values)

    def __str__(self) -> str:
        return self._delimiter.join(self.strings())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.values!r})"

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, ListValue):
            return self.values == other.values
        if isinstance(other, list):
            return self.values == other
        return NotImplemented

    __hash__ = None  # mutable

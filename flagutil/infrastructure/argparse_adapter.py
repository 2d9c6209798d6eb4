import argparse
import logging
from typing import Callable, TypeVar, Union

from flagutil.domain.errors import FlagValueError
from flagutil.domain.list_value import ListValue
from flagutil.domain.scalar_value import ScalarValue
from flagutil.presentation.error_messages import format_invalid_value

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Union[ListValue, ScalarValue])


class ValueAction(argparse.Action):
    """
    argparse Action backed by a flagutil value object.
    Each occurrence of the flag calls `value.set(raw)`, so list values
    accumulate and scalar values are replaced. The namespace attribute is the
    value object itself.
    """

    def __init__(self, option_strings, dest, value=None, **kwargs):
        if value is None:
            raise ValueError("ValueAction requires a value= object")
        if kwargs.get("nargs") is not None:
            raise ValueError("nargs is not supported; the raw string is split by the value")
        if kwargs.get("default") is None:
            kwargs["default"] = value
        super().__init__(option_strings, dest, **kwargs)
        self.value = value

    def __call__(self, parser, namespace, values, option_string=None):
        flag = option_string or self.dest
        try:
            self.value.set(values)
        except FlagValueError as e:
            logger.debug(f"flag {flag} rejected {values!r}: {e}")
            raise argparse.ArgumentError(self, format_invalid_value(values, flag, e)) from e
        logger.debug(f"flag {flag} set: {self.value}")
        setattr(namespace, self.dest, self.value)


def add_value_argument(parser: argparse.ArgumentParser, *flags: str, value: V, help=None) -> V:
    """Register `flags` on `parser` backed by `value` and return `value`."""
    parser.add_argument(*flags, action=ValueAction, value=value, help=help)
    return value


def value_type(factory: Callable[[], V]) -> Callable[[str], V]:
    """Build an argparse `type=` converter producing a fresh value per occurrence."""

    def convert(raw: str) -> V:
        value = factory()
        try:
            value.set(raw)
        except FlagValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
        return value

    convert.__name__ = getattr(factory, "__name__", "value")
    return convert

"""
仕様: 区切り文字付きリスト値 (ListValue)
"""

import pytest

from flagutil.domain.errors import FlagValueError, InvalidAddressError
from flagutil.domain.list_value import ListValue
from flagutil.domain.validators import AddressValidator, PassThroughValidator


class RejectingValidator:
    """Stub validator rejecting a fixed set of substrings."""

    def __init__(self, rejected):
        self.rejected = set(rejected)
        self.seen = []

    def convert(self, raw):
        self.seen.append(raw)
        if raw in self.rejected:
            raise FlagValueError(raw, "rejected")
        return raw.upper()

    def render(self, value):
        return value.lower()


def test_set_splits_on_comma_and_preserves_order():
    """正常系: カンマで分割し、入力順を保持する"""
    lv = ListValue(PassThroughValidator())
    lv.set("foo,bar,baz")

    assert lv.values == ["foo", "bar", "baz"]
    assert len(lv) == 3
    assert str(lv) == "foo,bar,baz"


def test_set_keeps_duplicates():
    """重複除去はしない"""
    lv = ListValue(PassThroughValidator())
    lv.set("a,a,b,a")
    assert lv.values == ["a", "a", "b", "a"]


def test_empty_substrings_are_passed_to_validator():
    """空の要素もバリデータに渡される"""
    validator = RejectingValidator(rejected=[])
    lv = ListValue(validator)

    lv.set(",a,,b,")

    assert validator.seen == ["", "a", "", "b", ""]
    assert lv.values == ["", "A", "", "B", ""]


def test_consecutive_set_calls_accumulate():
    """追加: set を複数回呼ぶと末尾に追加される"""
    lv = ListValue(PassThroughValidator())
    lv.set("a,b")
    lv.set("c")
    assert lv.values == ["a", "b", "c"]
    assert str(lv) == "a,b,c"


def test_failure_stops_at_first_invalid_element_and_keeps_prior_ones():
    """異常系: 失敗した要素で即座に停止し、それ以前の要素は残る"""
    validator = RejectingValidator(rejected=["bad"])
    lv = ListValue(validator)

    with pytest.raises(FlagValueError) as excinfo:
        lv.set("one,bad,three")

    assert excinfo.value.input == "bad"
    assert validator.seen == ["one", "bad"]
    assert lv.values == ["ONE"]


def test_address_list_error_cites_failing_substring():
    lv = ListValue(AddressValidator())

    with pytest.raises(InvalidAddressError, match="address foo: missing port in address"):
        lv.set("a:4000,foo")

    assert lv.values == ["a:4000"]


def test_str_uses_validator_rendering():
    lv = ListValue(RejectingValidator(rejected=[]))
    lv.set("x,y")
    assert lv.values == ["X", "Y"]
    assert lv.strings() == ["x", "y"]
    assert str(lv) == "x,y"


def test_round_trip_is_stable():
    """往復: String() の結果を再度 set すると同じ要素列になる"""
    original = ListValue(PassThroughValidator())
    original.set("alpha,beta,gamma")

    again = ListValue(PassThroughValidator())
    again.set(str(original))

    assert again == original


def test_custom_delimiter():
    lv = ListValue(PassThroughValidator(), delimiter=";")
    lv.set("a,b;c")
    assert lv.values == ["a,b", "c"]
    assert str(lv) == "a,b;c"
    assert lv.delimiter == ";"


def test_empty_delimiter_is_rejected():
    with pytest.raises(ValueError, match="delimiter"):
        ListValue(PassThroughValidator(), delimiter="")


def test_initial_values_and_container_protocol():
    lv = ListValue(PassThroughValidator(), values=("a", "b"))

    assert list(lv) == ["a", "b"]
    assert lv[0] == "a"
    assert lv[-1] == "b"
    assert lv == ["a", "b"]
    assert lv != ["b", "a"]

    copied = lv.to_list()
    copied.append("c")
    assert lv.values == ["a", "b"]


def test_from_raw_string_builds_populated_instance():
    lv = ListValue.from_raw_string("a,b", validator=PassThroughValidator())
    assert lv.values == ["a", "b"]


def test_empty_list_renders_as_empty_string():
    assert str(ListValue(PassThroughValidator())) == ""

"""
仕様: 環境変数のデフォルト値付き取得
"""

from flagutil.env import env_or_default


def test_returns_default_when_unset(monkeypatch):
    monkeypatch.delenv("FLAGUTIL_TEST_VAR", raising=False)
    assert env_or_default("FLAGUTIL_TEST_VAR", "fallback") == "fallback"


def test_returns_default_when_empty(monkeypatch):
    monkeypatch.setenv("FLAGUTIL_TEST_VAR", "")
    assert env_or_default("FLAGUTIL_TEST_VAR", "fallback") == "fallback"


def test_returns_value_when_set(monkeypatch):
    monkeypatch.setenv("FLAGUTIL_TEST_VAR", "efgh")
    assert env_or_default("FLAGUTIL_TEST_VAR", "abcd") == "efgh"

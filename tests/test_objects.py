from __future__ import annotations

from functional_collections import defaults, extend


def test_extend_mutates_and_returns_target() -> None:
    target = {"key1": "something"}
    result = extend(target, [{"key2": "new", "key3": "else"}, {"bla": "more"}])
    assert result is target
    assert target == {"key1": "something", "key2": "new", "key3": "else", "bla": "more"}


def test_extend_overwrites_left_to_right() -> None:
    target = {"a": 1}
    extend(target, [{"a": 2, "b": 2}, {"a": 3}])
    assert target == {"a": 3, "b": 2}


def test_extend_without_sources() -> None:
    target = {"a": 1}
    assert extend(target, []) == {"a": 1}


def test_extend_leaves_sources_untouched() -> None:
    source = {"b": 2}
    extend({"a": 1}, [source])
    assert source == {"b": 2}


def test_defaults_only_fills_missing_keys() -> None:
    target = {"flavor": "chocolate"}
    result = defaults(
        target, [{"flavor": "vanilla", "sprinkles": "lots"}, {"sprinkles": "none"}]
    )
    assert result is target
    assert target == {"flavor": "chocolate", "sprinkles": "lots"}


def test_defaults_treats_none_as_missing() -> None:
    target = {"flavor": None, "size": "large"}
    defaults(target, [{"flavor": "vanilla", "size": "small"}])
    assert target == {"flavor": "vanilla", "size": "large"}


def test_defaults_keeps_falsy_values() -> None:
    target = {"count": 0, "name": ""}
    defaults(target, [{"count": 5, "name": "x"}])
    assert target == {"count": 0, "name": ""}

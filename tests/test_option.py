import copy
import pickle
import threading

import pytest

from option_result import (
    NONE,
    EmptyUnwrap,
    Err,
    IncompleteMatch,
    InvalidConstruction,
    Nothing,
    Ok,
    OptionTag,
    Some,
    from_optional,
    none,
    some,
)


def test_some_holds_value():
    """some(v) is Some and unwraps to v."""
    for v in (0, "", "text", [], 3.5, False):
        opt = some(v)
        assert opt.is_some() is True
        assert opt.is_none() is False
        assert opt.unwrap() == v
        assert opt.tag == OptionTag.SOME


def test_none_is_empty():
    """none() is the empty Option."""
    assert none().is_none() is True
    assert none().is_some() is False
    assert none().tag == OptionTag.NONE


def test_none_is_singleton():
    """Every way of building the empty Option yields the same instance."""
    assert none() is NONE
    assert Nothing() is NONE


def test_none_singleton_across_threads():
    """Nothing() returns the shared instance from any thread."""
    seen: list[Nothing] = []
    threads = [threading.Thread(target=lambda: seen.append(Nothing())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(n is NONE for n in seen)


def test_none_singleton_survives_copy():
    """copy and pickle round trips give back the shared instance."""
    assert copy.copy(NONE) is NONE
    assert copy.deepcopy(NONE) is NONE
    assert pickle.loads(pickle.dumps(NONE)) is NONE
    assert copy.deepcopy(some([1])) == Some([1])


def test_some_rejects_none():
    """Constructing Some from None is an InvalidConstruction error."""
    with pytest.raises(InvalidConstruction):
        some(None)
    with pytest.raises(InvalidConstruction):
        Some(None)
    with pytest.raises(ValueError):
        some(None)


def test_from_optional():
    """from_optional downgrades None to NONE instead of raising."""
    assert from_optional(None) is NONE
    assert from_optional(4) == Some(4)
    assert from_optional(0) == Some(0)


def test_unwrap_or():
    """unwrap_or ignores the default on Some and returns it on None."""
    assert some(3).unwrap_or(99) == 3
    assert none().unwrap_or(99) == 99


def test_unwrap_or_else_is_lazy(recorder):
    """unwrap_or_else only calls the default function on None, exactly once."""
    fn = recorder(returns=42)
    assert some(3).unwrap_or_else(fn) == 3
    assert fn.count == 0

    assert none().unwrap_or_else(fn) == 42
    assert fn.count == 1


def test_unwrap_on_none_raises():
    """unwrap on the empty Option raises EmptyUnwrap."""
    with pytest.raises(EmptyUnwrap):
        none().unwrap()


def test_expect_carries_message():
    """expect uses the caller message on None."""
    assert some("a").expect("unused") == "a"
    with pytest.raises(EmptyUnwrap, match="config missing"):
        NONE.expect("config missing")


def test_unwrap_failure_is_logged(debug_logs):
    """A failed unwrap leaves a debug record on the library logger."""
    with pytest.raises(EmptyUnwrap):
        NONE.unwrap()
    assert any("unwrap() on Nothing" in r.message for r in debug_logs.records)


def test_match_dispatches_some(recorder):
    """match on Some runs only the some handler, once."""
    on_some = recorder(returns="S")
    on_none = recorder(returns="N")
    assert some(5).match(some=on_some, none=on_none) == "S"
    assert on_some.calls == [(5,)]
    assert on_none.count == 0


def test_match_dispatches_none(recorder):
    """match on None runs only the none handler, once."""
    on_some = recorder(returns="S")
    on_none = recorder(returns="N")
    assert none().match(some=on_some, none=on_none) == "N"
    assert on_none.calls == [()]
    assert on_some.count == 0


def test_match_requires_both_handlers(recorder):
    """A missing or non-callable handler is rejected before dispatch."""
    on_some = recorder()
    with pytest.raises(IncompleteMatch):
        some(1).match(some=on_some, none=None)
    assert on_some.count == 0

    with pytest.raises(TypeError):
        some(1).match(some=on_some)


def test_structural_pattern_matching():
    """Some and Nothing work as class patterns."""
    def describe(opt):
        match opt:
            case Some(v):
                return f"some {v}"
            case Nothing():
                return "none"

    assert describe(some(2)) == "some 2"
    assert describe(NONE) == "none"


def test_contains():
    """contains compares the held value with ==."""
    assert some(7).contains(7) is True
    assert some(7).contains(8) is False
    assert some([1, 2]).contains([1, 2]) is True
    assert none().contains(7) is False
    assert none().contains(None) is False


def test_and_truth_table(option_pairs):
    """and_ returns other only when both are Some."""
    a, b = option_pairs[("some", "some")]
    assert a.and_(b) is b
    for key in (("some", "none"), ("none", "some"), ("none", "none")):
        a, b = option_pairs[key]
        assert a.and_(b) is NONE


def test_or_truth_table(option_pairs):
    """or_ returns self when Some, otherwise other."""
    a, b = option_pairs[("some", "some")]
    assert a.or_(b) is a
    a, b = option_pairs[("some", "none")]
    assert a.or_(b) is a
    a, b = option_pairs[("none", "some")]
    assert a.or_(b) is b
    a, b = option_pairs[("none", "none")]
    assert a.or_(b) is NONE


def test_map_and_then():
    """map transforms Some, and a None return collapses to NONE."""
    assert some(2).map(lambda x: x * 10) == Some(20)
    assert some(2).map(lambda x: None) is NONE
    assert NONE.map(lambda x: x * 10) is NONE

    half = lambda x: some(x // 2) if x % 2 == 0 else NONE
    assert some(8).and_then(half) == Some(4)
    assert some(3).and_then(half) is NONE
    assert NONE.and_then(half) is NONE


def test_or_else_is_lazy(recorder):
    """or_else calls the fallback only on None."""
    fallback = recorder(returns=Some("fb"))
    assert some("x").or_else(fallback) == Some("x")
    assert fallback.count == 0
    assert NONE.or_else(fallback) == Some("fb")
    assert fallback.count == 1


def test_filter():
    """filter keeps the value only when the predicate accepts it."""
    assert some(4).filter(lambda x: x > 3) == Some(4)
    assert some(2).filter(lambda x: x > 3) is NONE
    assert NONE.filter(lambda x: True) is NONE


def test_ok_or():
    """ok_or converts Option to Result."""
    assert some(1).ok_or("missing") == Ok(1)
    assert NONE.ok_or("missing") == Err("missing")
    assert NONE.ok_or_else(lambda: "lazy") == Err("lazy")


def test_truthiness_and_iteration():
    """Some is truthy and yields its value; NONE is falsy and empty."""
    assert bool(some(0)) is True
    assert bool(NONE) is False
    assert list(some("v")) == ["v"]
    assert list(NONE) == []


def test_equality_and_hash():
    """Options compare and hash by tag and value."""
    assert some(1) == Some(1)
    assert some(1) != Some(2)
    assert some(1) != NONE
    assert len({some(1), Some(1), NONE, none()}) == 2


def test_immutable():
    """Instances cannot be modified after construction."""
    opt = some(1)
    with pytest.raises(AttributeError):
        opt.value = 2  # type: ignore[misc]


def test_string_representation():
    """str shows the tag and the held value's type."""
    assert str(some(5)) == "Option<int>(5)"
    assert str(some("hi")) == "Option<str>(hi)"
    assert str(none()) == "Option<None>"

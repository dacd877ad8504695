"""
Test the curry module
"""
import pytest
from hypothesis import given, strategies as st

from optica import __, config
from optica.curry import ArityError, Curried, curry, curried, infer_arity
from .test_utils import add3, collect3


def split_points(n: int) -> st.SearchStrategy[list[int]]:
    """Sorted cut points that split n arguments into consecutive non-empty groups."""
    return st.sets(st.integers(min_value=1, max_value=n - 1), max_size=n - 1).map(sorted)


class TestCompleteness:
    @given(args=st.lists(st.integers(), min_size=1, max_size=6), data=st.data())
    def test_any_grouping_matches_direct_call(self, args, data) -> None:
        n = len(args)
        fn = lambda *xs: tuple(xs)
        cuts = data.draw(split_points(n)) if n > 1 else []
        bounds = [0, *cuts, n]
        result = curry(fn, n)
        for lo, hi in zip(bounds, bounds[1:]):
            result = result(*args[lo:hi])
        assert result == fn(*args)

    def test_groupings(self) -> None:
        g = curry(add3)
        assert g(1)(2)(3) == 6
        assert g(1, 2)(3) == 6
        assert g(1)(2, 3) == 6
        assert g(1, 2, 3) == 6

    def test_zero_arity_runs_on_call(self) -> None:
        assert curry(lambda: 42, 0)() == 42

    def test_empty_call_returns_equivalent(self) -> None:
        g = curry(add3)(1)
        h = g()
        assert isinstance(h, Curried)
        assert h is not g
        assert h(2, 3) == 6


class TestPlaceholders:
    def test_documented_combinations(self) -> None:
        g = curry(collect3)
        assert g(__, 2, 3)(1) == (1, 2, 3)
        assert g(__, __, 3)(1)(2) == (1, 2, 3)
        assert g(__, __, 3)(1, 2) == (1, 2, 3)
        assert g(__, 2, __)(1, 3) == (1, 2, 3)

    def test_trailing_arguments_after_placeholder(self) -> None:
        g = curry(collect3)
        assert g(__, 2)(1)(3) == (1, 2, 3)
        assert g(__, 2)(1, 3) == (1, 2, 3)

    def test_placeholder_fill_keeps_slot_open(self) -> None:
        g = curry(collect3)
        assert g(__, 2)(__, 3)(1) == (1, 2, 3)

    def test_placeholder_is_never_passed_to_function(self) -> None:
        seen = []
        g = curry(lambda a, b: seen.append((a, b)) or (a, b))
        g(__, None)(None)
        assert seen == [(None, None)]

    def test_remaining(self) -> None:
        g = curry(collect3)
        assert g.remaining == 3
        assert g(__, 2).remaining == 2
        assert g(__, __, 3).remaining == 2


class TestImmutability:
    def test_branches_are_independent(self) -> None:
        base = curry(collect3)(1)
        left, right = base(2), base(20)
        assert left(3) == (1, 2, 3)
        assert right(30) == (1, 20, 30)
        assert base.args == (1,)

    def test_placeholder_branches_are_independent(self) -> None:
        base = curry(collect3)(__, 2, 3)
        assert base(1) == (1, 2, 3)
        assert base(10) == (10, 2, 3)
        assert base.args == (__, 2, 3)


class TestArityOverflow:
    def test_too_many_at_once(self) -> None:
        with pytest.raises(ArityError):
            curry(lambda a, b: a + b, 2)(1, 2, 3)

    def test_too_many_after_partial(self) -> None:
        with pytest.raises(ArityError):
            curry(add3)(1, 2)(3, 4)

    def test_is_type_error(self) -> None:
        assert issubclass(ArityError, TypeError)

    def test_overflow_skips_handler(self) -> None:
        config.set_exception_handler(lambda e, name: "handled")
        with pytest.raises(ArityError):
            curry(add3)(1, 2, 3, 4)


class TestArity:
    def test_inferred_from_required_positionals(self) -> None:
        def f(a, b, c=3, *, d=4):
            return a + b + c + d
        assert infer_arity(f) == 2
        assert curry(f)(1)(2) == 10

    def test_variadic_requires_explicit_arity(self) -> None:
        with pytest.raises(TypeError, match="variadic"):
            curry(lambda *xs: sum(xs))
        assert curry(lambda *xs: sum(xs), 3)(1)(2)(3) == 6

    def test_uninspectable_callable(self) -> None:
        class Opaque:
            __signature__ = "not a signature"
            def __call__(self, x):
                return x
        with pytest.raises(TypeError):
            infer_arity(Opaque())

    @pytest.mark.parametrize("arity", [-1, 1.5, "2", True])
    def test_invalid_arity(self, arity) -> None:
        with pytest.raises(ValueError):
            curry(add3, arity)


class TestErrors:
    def test_propagates_unchanged(self) -> None:
        err = ValueError("boom")
        def fail(a, b):
            raise err
        with pytest.raises(ValueError) as info:
            curry(fail)(1)(2)
        assert info.value is err

    def test_global_handler_result_replaces_error(self) -> None:
        calls = []
        config.set_exception_handler(lambda e, name: calls.append((type(e), name)) or "recovered")
        assert curry(add3)(1, "", 2) == "recovered"
        assert calls == [(TypeError, "add3")]

    def test_global_handler_may_reraise(self) -> None:
        def handler(e, name):
            raise RuntimeError(f"{name}: {e}")
        config.set_exception_handler(handler)
        with pytest.raises(RuntimeError, match="add3"):
            curry(add3)(1, "", 2)

    def test_cleared_handler_restores_propagation(self) -> None:
        config.set_exception_handler(lambda e, name: None)
        config.set_exception_handler(None)
        with pytest.raises(TypeError):
            curry(add3)(1, "", 2)

    def test_injected_handler_wins(self) -> None:
        config.set_exception_handler(lambda e, name: "global")
        g = curry(add3, exception_handler=lambda e, name: "local")
        assert g(1)("")(2) == "local"
        assert curry(add3)(1, "", 2) == "global"


    def test_nested_curried_calls_reach_handler_once(self) -> None:
        calls = []
        config.set_exception_handler(lambda e, name: calls.append((type(e), name)) or "recovered")
        inner = curry(add3)
        outer = curry(lambda a, b: inner(a, b, 1))
        assert outer(1, "") == "recovered"
        assert calls == [(TypeError, "<lambda>")]

    def test_injected_handler_applies_when_nested(self) -> None:
        config.set_exception_handler(lambda e, name: "global")
        inner = curry(add3, exception_handler=lambda e, name: 100)
        outer = curry(lambda a, b: inner(a, b, 1) + 1)
        assert outer(1, "") == 101

    def test_handler_state_unwinds_after_error(self) -> None:
        config.set_exception_handler(lambda e, name: "global")
        outer = curry(lambda a: curry(add3)(a, "", 1))
        assert outer(1) == "global"
        assert curry(add3)(1, "", 2) == "global"


class TestWrapper:
    def test_metadata(self) -> None:
        g = curry(add3)
        assert g.__name__ == "add3"
        assert g.__wrapped__ is add3
        assert g(1).__name__ == "add3"
        assert "add3/3" in repr(g(1))

    def test_decorator_forms(self) -> None:
        @curried
        def pair(a, b):
            """Make a pair."""
            return (a, b)

        @curried(arity=2)
        def total(*xs):
            return sum(xs)

        assert pair(1)(2) == (1, 2)
        assert pair.__doc__ == "Make a pair."
        assert total(1)(2) == 3

    def test_bound_method(self) -> None:
        class Scale:
            def __init__(self, factor):
                self.factor = factor
            def apply(self, x, offset):
                return x * self.factor + offset
        g = curry(Scale(3).apply)
        assert g.arity == 2
        assert g(2)(1) == 7
        assert g(__, 1)(2) == 7

    def test_recurrying_keeps_bound_args(self) -> None:
        g = curry(curry(collect3)(1))
        assert g.args == (1,)
        assert g(2, 3) == (1, 2, 3)

    def test_plain_callable_interop(self) -> None:
        add = curry(lambda a, b: a + b)
        assert list(map(add(10), [1, 2, 3])) == [11, 12, 13]
        assert sorted([3, 1, 2], key=add(0)) == [1, 2, 3]

from __future__ import annotations

from fnflow import F, T, always, compose, curry, curry_n, identity, noop, once, pipe


def test_constant_functions():
    assert always(1)() == 1
    assert always({})("ignored", key="ignored") == {}
    assert T() is True
    assert F() is False
    assert noop() is None
    assert identity(100) == 100


def test_compose_runs_right_to_left():
    assert compose(lambda val: f"{val}!", lambda val: val + 1)(100) == "101!"
    assert compose(lambda a: a + 1, lambda b: b / 2, lambda c: c * 10)(1) == 6


def test_pipe_runs_left_to_right():
    assert pipe(lambda val: val + 1, lambda val: f"{val}!")(100) == "101!"
    assert pipe(lambda a: a + 1, lambda b: b / 2, lambda c: c * 10)(1) == 10


def test_empty_composition_is_identity():
    assert compose()(5) == 5
    assert pipe()(5) == 5


def test_curry_uses_required_positional_parameters():
    def add(one, two, three, scale=1):
        return (one + two + three) * scale

    fn = curry(add)
    assert callable(fn(1))
    assert callable(fn(1, 2))
    assert fn(1, 2, 3) == 6
    assert fn(1, 2)(3) == 6
    assert fn(1)(2)(3) == 6
    assert fn(1)(2, 3, 10) == 60
    assert fn.arity == 3


def test_curry_accepts_explicit_arity_and_initial_args():
    def join(*parts):
        return "-".join(parts)

    assert curry(join, "a", arity=3)("b")("c") == "a-b-c"


def test_curry_n_runs_once_enough_arguments_are_buffered():
    fn = curry_n(2, lambda one, two, three=0: one + two + three)
    assert callable(fn(1))
    assert fn(1, 2) == 3
    assert fn(1, 2, 3) == 6
    assert fn(1)(2, 3) == 6


def test_curried_partials_are_independent():
    fn = curry_n(2, lambda a, b: (a, b))
    partial = fn("x")
    assert partial(1) == ("x", 1)
    assert partial(2) == ("x", 2)


def test_once_caches_first_result():
    calls: list[tuple[int, ...]] = []

    def total(*values: int) -> int:
        calls.append(values)
        return sum(values)

    fn = once(total)
    assert fn(1, 2, 3) == 6
    assert fn(10, 20, 30) == 6
    assert calls == [(1, 2, 3)]
    assert fn.__name__ == "total"

"""Tests for map_, map2, and_map, and_then and the error-merge rule."""

import pytest

from formverify import (
    Err,
    Ok,
    all_of,
    and_map,
    and_then,
    apply_results,
    compose,
    custom,
    fail,
    from_callable,
    from_predicate,
    map2,
    map_,
    map_errors,
    run,
    succeed,
)

non_empty = custom(lambda s: Ok(s) if s else Err(["empty"]))
short = custom(lambda s: Ok(s) if len(s) < 4 else Err(["too long"]))


class TestApplyResults:
    """The single merge rule shared by every accumulating combinator."""

    def test_both_ok(self):
        assert apply_results(Ok(lambda x: x + 1), Ok(1)) == Ok(2)

    def test_both_err_concatenates_in_order(self):
        assert apply_results(Err(["a", "b"]), Err(["c"])) == Err(["a", "b", "c"])

    def test_function_err_only(self):
        assert apply_results(Err(["a"]), Ok(1)) == Err(["a"])

    def test_value_err_only(self):
        assert apply_results(Ok(lambda x: x), Err(["b"])) == Err(["b"])

    def test_does_not_alias_input_lists(self):
        e1, e2 = ["a"], ["b"]
        merged = apply_results(Err(e1), Err(e2)).unwrap_err()
        merged.append("c")
        assert e1 == ["a"] and e2 == ["b"]

    def test_rejects_non_results(self):
        with pytest.raises(TypeError):
            apply_results("nope", Ok(1))


class TestMap:
    def test_identity_law(self):
        for value in ["", "abc"]:
            assert run(map_(lambda x: x, non_empty), value) == run(non_empty, value)

    def test_transforms_success(self):
        assert run(map_(len, non_empty), "abc") == Ok(3)

    def test_failure_passes_through(self):
        assert run(map_(len, non_empty), "") == Err(["empty"])

    def test_method_form(self):
        assert non_empty.map(str.upper).run("ab") == Ok("AB")


class TestMap2:
    def test_combines_successes(self):
        v = map2(lambda a, b: (a, b), non_empty, short)
        assert run(v, "ab") == Ok(("ab", "ab"))

    def test_both_fail_concatenates_first_then_second(self):
        v = map2(lambda a, b: (a, b), fail("first"), fail("second"))
        assert run(v, None) == Err(["first", "second"])

    def test_does_not_short_circuit(self):
        seen = []

        def record(value):
            seen.append(value)
            return Err(["second"])

        v = map2(lambda a, b: a, fail("first"), custom(record))
        assert run(v, "x") == Err(["first", "second"])
        assert seen == ["x"]

    def test_single_failure_propagates_alone(self):
        assert run(map2(lambda a, b: a, non_empty, fail("nope")), "ab") == Err(["nope"])
        assert run(map2(lambda a, b: a, fail("nope"), non_empty), "ab") == Err(["nope"])


class TestAndMap:
    def test_applies_function_to_value(self):
        assert run(and_map(short, succeed(len)), "abc") == Ok(3)

    def test_value_side_errors_come_first(self):
        v = and_map(fail("value"), fail("function"))
        assert run(v, None) == Err(["value", "function"])

    def test_matches_map2_with_reversed_application(self):
        cases = [
            (fail("value"), fail("function")),
            (short, fail("function")),
            (fail("value"), succeed(len)),
            (short, succeed(len)),
        ]
        for vb, vf in cases:
            expected = run(map2(lambda b, f: f(b), vb, vf), "ab")
            assert run(and_map(vb, vf), "ab") == expected

    def test_chains_like_a_pipeline(self):
        pair = succeed(lambda a: lambda b: (a, b)).and_map(non_empty).and_map(short)
        assert pair.run("ab") == Ok(("ab", "ab"))
        assert pair.run("") == Err(["empty"])
        assert pair.run("abcd") == Err(["too long"])


class TestAndThen:
    def test_runs_second_against_original_input(self):
        seen = []

        def next_step(length):
            def _check(value):
                seen.append(value)
                return Ok((length, value))
            return custom(_check)

        v = and_then(next_step, map_(len, non_empty))
        assert run(v, "abc") == Ok((3, "abc"))
        assert seen == ["abc"]

    def test_short_circuits_without_calling_f(self):
        called = []

        def next_step(value):
            called.append(value)
            return succeed(value)

        assert run(and_then(next_step, fail("first")), "x") == Err(["first"])
        assert called == []

    def test_second_failure_reported(self):
        v = non_empty.and_then(lambda s: fail(f"{s} is taken"))
        assert v.run("bob") == Err(["bob is taken"])


class TestMapErrors:
    def test_transforms_every_error(self):
        v = map_errors(str.upper, map2(lambda a, b: a, fail("a"), fail("b")))
        assert run(v, None) == Err(["A", "B"])

    def test_success_untouched(self):
        assert non_empty.map_errors(str.upper).run("x") == Ok("x")


class TestCompose:
    def test_feeds_output_forward(self):
        adult = compose(from_predicate(lambda n: n >= 18, "too young"), from_callable(int, "not a number"))
        assert run(adult, "30") == Ok(30)
        assert run(adult, "12") == Err(["too young"])

    def test_short_circuits_on_first_failure(self):
        adult = from_callable(int, "not a number").compose(from_predicate(lambda n: n >= 18, "too young"))
        assert run(adult, "abc") == Err(["not a number"])


class TestAllOf:
    def test_keeps_input_and_collects_every_error(self):
        v = all_of(non_empty, short, fail("always"))
        assert run(v, "abc") == Err(["always"])
        assert run(v, "abcdef") == Err(["too long", "always"])

    def test_all_pass(self):
        assert run(all_of(non_empty, short), "ab") == Ok("ab")

    def test_empty_is_identity(self):
        assert run(all_of(), 7) == Ok(7)

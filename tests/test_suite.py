"""Tests for suite composition and counters."""

import threading

import pytest

from minunit.assertions import assert_print, check, mu_assert
from minunit.case import case
from minunit.suite import Suite, SuiteState


class Calls:
    """Records which cases ran, in order."""

    def __init__(self):
        self.names: list[str] = []

    def passing(self, name):
        def run():
            self.names.append(name)
            return None

        run.__name__ = name
        return run

    def failing(self, name):
        def run():
            self.names.append(name)
            return check(name, False)

        run.__name__ = name
        return run


@pytest.fixture
def calls():
    return Calls()


def test_all_passing(calls):
    suite = Suite("all", [calls.passing("a"), calls.passing("b"), calls.passing("c")])
    result = suite.execute()
    assert result.passed
    assert result.diagnostic is None
    assert result.run == result.total == 3
    assert calls.names == ["a", "b", "c"]


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_kth_failure_stops_suite(calls, k):
    cases = [
        calls.failing(f"c{i}") if i == k else calls.passing(f"c{i}")
        for i in range(1, 5)
    ]
    result = Suite("kth", cases).execute()

    assert not result.passed
    assert result.diagnostic.message == f"c{k}"
    assert result.failed_case == f"c{k}"
    assert result.run == k - 1
    assert result.total == 4
    assert calls.names == [f"c{i}" for i in range(1, k + 1)]


def test_concrete_scenario():
    executed = []

    def case_a():
        executed.append("a")
        return check("x", 1==1)

    def case_b():
        executed.append("b")
        return check("y", 1==2)

    def case_c():
        executed.append("c")
        return None

    result = Suite("scenario", [case_a, case_b, case_c]).execute()

    assert '"y"' in str(result.diagnostic)
    assert "1==2" in str(result.diagnostic)
    assert result.run == 1
    assert result.total == 3
    assert executed == ["a", "b"]


def test_setup_and_teardown_run_first_and_last(calls):
    suite = Suite(
        "fixtures",
        [calls.passing("body")],
        setup=calls.passing("setup"),
        teardown=calls.passing("teardown"),
    )
    result = suite.execute()
    assert calls.names == ["setup", "body", "teardown"]
    assert result.run == result.total == 3


def test_teardown_skipped_after_failure(calls):
    suite = Suite(
        "fixtures",
        [calls.failing("body")],
        setup=calls.passing("setup"),
        teardown=calls.passing("teardown"),
    )
    result = suite.execute()
    assert calls.names == ["setup", "body"]
    assert result.run == 1
    assert result.total == 3


def test_failing_setup_stops_everything(calls):
    suite = Suite(
        "fixtures",
        [calls.passing("body")],
        setup=calls.failing("setup"),
        teardown=calls.passing("teardown"),
    )
    result = suite.execute()
    assert calls.names == ["setup"]
    assert result.run == 0


def test_declared_total_overrides_case_count(calls):
    result = Suite("declared", [calls.passing("a")], total=5).execute()
    assert result.total == 5
    assert result.run == 1
    assert result.counters.not_run == 4


def test_reexecution_is_idempotent(calls):
    suite = Suite("again", [calls.passing("a"), calls.failing("b"), calls.passing("c")])
    first = suite.execute()
    second = suite.execute()
    assert first.diagnostic == second.diagnostic
    assert first.failed_case == second.failed_case
    assert first.counters == second.counters
    assert calls.names == ["a", "b", "a", "b"]


def test_reexecution_resets_counters(calls):
    suite = Suite("again", [calls.passing("a")])
    first = suite.execute()
    second = suite.execute()
    assert second.run == 1
    assert first.counters is not second.counters
    assert first.run == 1


def test_state_machine(calls):
    seen = []
    suite = Suite("states", [])

    def observe():
        seen.append(suite.state)
        return None

    suite.cases = [observe]
    assert suite.state is SuiteState.NOT_STARTED
    suite.execute()
    assert seen == [SuiteState.RUNNING]
    assert suite.state is SuiteState.PASSED

    suite.cases = [calls.failing("x")]
    suite.execute()
    assert suite.state is SuiteState.FAILED


def test_empty_suite_passes():
    result = Suite("empty", []).execute()
    assert result.passed
    assert result.run == result.total == 0


def test_suite_traces_passed_cases(sink, calls):
    Suite("traced", [calls.passing("a"), calls.failing("b")], sink=sink).execute()
    assert sink.infos == ['Test ok: "a"']


def test_decorated_cases_abort_at_first_assertion():
    evaluated = []

    @case
    def parses():
        mu_assert("first", True)
        evaluated.append("after first")
        mu_assert("second", [] == [1])
        evaluated.append("after second")

    result = Suite("decorated", [parses]).execute()
    assert result.diagnostic.predicate_text == "[] == [1]"
    assert evaluated == ["after first"]
    assert result.run == 0


def test_background_failure_does_not_affect_suite(sink):
    def spawns_worker():
        thread = threading.Thread(target=lambda: assert_print("bg", False, sink=sink))
        thread.start()
        thread.join()
        return None

    result = Suite("bg", [spawns_worker], sink=sink).execute()
    assert result.passed
    assert result.run == result.total == 1
    assert len(sink.errors) == 1


def test_crashing_case_propagates(calls):
    def crashes():
        raise RuntimeError("fault")

    suite = Suite("crash", [calls.passing("a"), crashes, calls.passing("c")])
    with pytest.raises(RuntimeError, match="fault"):
        suite.execute()
    assert calls.names == ["a"]


def test_nested_suite_counts_as_one_case(calls):
    inner = Suite("inner", [calls.passing("i1"), calls.passing("i2")])
    outer = Suite("outer", [calls.passing("o1"), inner])
    result = outer.execute()
    assert result.passed
    assert result.total == 2
    assert result.run == 2
    assert inner.counters.run == 2
    assert calls.names == ["o1", "i1", "i2"]


def test_nested_suite_failure_propagates(calls):
    inner = Suite("inner", [calls.failing("i1"), calls.passing("i2")])
    outer = Suite("outer", [inner, calls.passing("o2")])
    result = outer.execute()
    assert result.diagnostic.message == "i1"
    assert result.failed_case == "inner"
    assert result.run == 0
    assert calls.names == ["i1"]


def test_independent_suites_keep_own_counters(calls):
    first = Suite("first", [calls.passing("a")])
    second = Suite("second", [calls.passing("b"), calls.passing("c")])
    first_result = first.execute()
    second_result = second.execute()
    assert first_result.run == 1
    assert second_result.run == 2


def test_undecorated_mu_assert_stops_suite(calls):
    def plain():
        mu_assert("plain", "a" == "b")

    result = Suite("plain", [calls.passing("a"), plain, calls.passing("c")]).execute()
    assert result.diagnostic.predicate_text == '"a" == "b"'
    assert result.failed_case == "plain"
    assert result.run == 1
    assert calls.names == ["a"]

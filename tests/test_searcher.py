import pytest

from collatz_search import (
    ArithmeticOverflowError,
    Coalesce,
    CollatzSearcher,
    IntegerDomain,
    SearchState,
    SearchTerminatedError,
    StepResult,
)


def test_new_searcher_state():
    s = CollatzSearcher(5)
    assert s.current_value == 5
    assert s.base_under_test == 4
    assert s.steps == 0
    assert s.state is SearchState.RUNNING
    assert s.validated.as_tuples() == [(1, 4)]
    assert len(s.unvalidated) == 0


def test_empty_searcher_has_nothing_validated():
    s = CollatzSearcher.empty(5)
    assert s.current_value == 5
    assert s.base_under_test == 4
    assert len(s.validated) == 0
    assert len(s.unvalidated) == 0


def test_report_interval_must_be_positive():
    with pytest.raises(ValueError):
        CollatzSearcher(5, report_interval=0)


def test_seed_five_proves_five(recorder):
    s = CollatzSearcher(5, observer=recorder)

    # 5 -> 16 -> 8 -> 4 lands in the seeded interval
    assert [s.step() for _ in range(3)] == [
        StepResult.CONTINUE,
        StepResult.CONTINUE,
        StepResult.BASE_PROVEN,
    ]
    assert s.base_under_test == 5
    assert s.current_value == 5
    assert len(s.unvalidated) == 0
    assert s.validated.contains(16) and s.validated.contains(8)

    # 16 is now known good, so 5 is proven in one step
    assert s.step() is StepResult.BASE_PROVEN
    assert s.validated.contains(5)
    assert s.base_under_test == 6
    assert recorder.proven == [(4, 4), (5, 16)]

    s.validated.sort()
    assert s.validated.as_tuples() == [(1, 5), (8, 8), (16, 16)]


def test_proves_every_base_up_to_a_bound():
    s = CollatzSearcher(5)
    while s.base_under_test <= 1000:
        assert not s.step().is_terminal
    assert all(s.validated.contains(n) for n in range(1, 1001))
    assert s.current_value == 1001


def test_coalescing_modes_reach_the_same_validated_set():
    pairwise = CollatzSearcher(5, coalesce=Coalesce.PAIRWISE)
    full = CollatzSearcher(5, coalesce=Coalesce.FULL)
    pairwise.run(5000)
    full.run(5000)
    assert pairwise.base_under_test == full.base_under_test
    assert pairwise.validated == full.validated


def test_revisit_reports_cycle(recorder):
    s = CollatzSearcher.empty(8, observer=recorder)
    s.unvalidated.insert(4)

    assert s.step() is StepResult.CYCLE_DETECTED
    assert s.state is SearchState.CYCLE_DETECTED
    assert s.cycle_value == 4
    assert recorder.cycles == [4]

    with pytest.raises(SearchTerminatedError):
        s.step()
    assert s.steps == 1
    assert s.current_value == 4


def test_trivial_cycle_is_found_without_seeding():
    s = CollatzSearcher.empty(1)
    assert s.run() is StepResult.CYCLE_DETECTED
    # 1 -> 4 -> 2 -> 1 -> 4
    assert s.steps == 4
    assert s.cycle_value == 4


def test_run_honours_step_budget():
    s = CollatzSearcher(5)
    assert s.run(0) is StepResult.CONTINUE
    assert s.steps == 0
    s.run(250)
    assert s.steps == 250
    assert s.state is SearchState.RUNNING


def test_run_rejects_negative_budget():
    with pytest.raises(ValueError):
        CollatzSearcher(5).run(-1)


def test_checkpoints_every_report_interval(recorder):
    s = CollatzSearcher(5, report_interval=3, observer=recorder)
    s.run(7)
    assert [steps for steps, _ in recorder.checkpoints] == [0, 3, 6]
    assert recorder.checkpoints[0] == (0, [(1, 4)])


def test_checkpoint_snapshot_is_sorted(recorder):
    s = CollatzSearcher(5, report_interval=4, observer=recorder)
    s.run(5)
    _, snapshot = recorder.checkpoints[-1]
    assert snapshot == sorted(snapshot)
    assert snapshot == [(1, 5), (8, 8), (16, 16)]


def test_overflow_aborts_the_step():
    s = CollatzSearcher(5, domain=IntegerDomain(4))
    with pytest.raises(ArithmeticOverflowError):
        s.step()
    assert s.current_value == 5
    assert s.steps == 0


def test_seed_outside_domain_is_rejected():
    with pytest.raises(ArithmeticOverflowError):
        CollatzSearcher(300, domain=IntegerDomain(8))

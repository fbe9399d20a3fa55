import random
import logging
import pytest
from unittest.mock import MagicMock
from stepsearch.driver.inputs import (
    DriverError,
    InputValidationError,
    SessionStateError,
    parse_array,
    parse_target,
    random_array,
)
from stepsearch.driver.session import RunStats, SearchSession
from stepsearch.search.registry import UnknownAlgorithmError


@pytest.fixture
def session(sorted_array):
    return SearchSession(algorithm="binary", array=sorted_array, rng=random.Random(3))


def test_parse_array_sorts_and_drops_invalid_tokens():
    assert parse_array("9, 3,x, 7,,1") == [1, 3, 7, 9]


def test_parse_array_accepts_negative_values():
    assert parse_array("-4,2,-10") == [-10, -4, 2]


def test_parse_array_reads_leading_integers():
    assert parse_array("3.7, 12abc, x, +5") == [3, 5, 12]


@pytest.mark.parametrize("text", ["", "a,b", ",".join(["1"] * 41)])
def test_parse_array_length_limits(text):
    with pytest.raises(InputValidationError, match="Array must have between 1 and 40 numbers."):
        parse_array(text)


def test_parse_array_custom_limits():
    with pytest.raises(InputValidationError, match="between 3 and 5"):
        parse_array("1,2", min_length=3, max_length=5)


def test_parse_target():
    assert parse_target(" 12 ") == 12
    assert parse_target("7.9") == 7
    assert parse_target("-3px") == -3
    with pytest.raises(InputValidationError, match="Please enter a valid target value."):
        parse_target("twelve")
    with pytest.raises(InputValidationError):
        parse_target(None)


def test_errors_share_a_base():
    assert issubclass(InputValidationError, DriverError)
    assert issubclass(SessionStateError, DriverError)


def test_random_array_is_sorted_and_contains_target():
    values, target = random_array(random.Random(42))
    assert 20 <= len(values) <= 30
    assert values == sorted(values)
    assert all(1 <= value <= 40 for value in values)
    assert target in values


def test_random_array_is_reproducible():
    assert random_array(random.Random(5)) == random_array(random.Random(5))


def test_run_stats_result():
    assert RunStats().result == "-"
    assert RunStats(found=True, index=3).result == "Found at index 3"
    assert RunStats(found=False).result == "Not found"


def test_step_by_step_run(session):
    session.start(7)
    assert session.running

    step, has_more = session.step()
    assert step.comparing_indices == (2,)
    assert has_more
    assert session.stats.comparisons == 1
    assert session.stats.found is None

    while has_more:
        step, has_more = session.step()

    assert not session.running
    assert session.stats.found is True
    assert session.stats.index == 3
    assert session.stats.comparisons == 3
    assert session.stats.elapsed >= 0
    assert session.last_step is step


def test_start_while_running_is_rejected(session):
    session.start(7)
    with pytest.raises(SessionStateError, match="already running"):
        session.start(9)


def test_step_without_run_is_rejected(session):
    with pytest.raises(SessionStateError, match="No search is running"):
        session.step()


def test_start_does_not_share_the_array(session):
    session.start(5)
    session.array.append(100)
    step, _ = session.step()
    assert len(step.snapshot) == 6


def test_play_paces_between_resumes(session):
    sleep = MagicMock()
    seen = []
    session.start(7)

    stats = session.play(0.25, on_step=lambda step, stats: seen.append(step), sleep=sleep)

    assert len(seen) == 4
    assert seen[-1].is_terminal
    # No pause after the terminal step
    assert sleep.call_count == 3
    sleep.assert_called_with(0.25)
    assert stats.found is True


def test_play_without_delay_never_sleeps(session):
    sleep = MagicMock()
    session.start(4)
    stats = session.play(0, sleep=sleep)
    sleep.assert_not_called()
    assert stats.found is False
    assert stats.index == -1


def test_select_algorithm_discards_run(session):
    session.start(7)
    session.step()

    assert session.select_algorithm("jump") is True
    assert not session.running
    assert session.stats == RunStats()
    assert session.algorithm.identifier == "jump"


def test_select_same_algorithm_keeps_run(session):
    session.start(7)
    session.step()
    assert session.select_algorithm("BINARY") is False
    assert session.running
    assert session.stats.comparisons == 1


def test_select_unknown_algorithm(session):
    with pytest.raises(UnknownAlgorithmError, match="Unknown search algorithm 'ternary'"):
        session.select_algorithm("ternary")


def test_reset_restores_original_array(session, sorted_array):
    session.array.append(99)
    session.start(3)
    session.step()
    session.reset()

    assert not session.running
    assert session.array == sorted_array
    assert session.stats == RunStats()
    assert session.last_step is None


def test_set_array_abandons_run(session):
    session.start(3)
    session.set_array([2, 4])
    assert not session.running
    assert session.original_array == [2, 4]


def test_randomize_returns_present_target(session):
    target = session.randomize(min_length=5, max_length=5, min_value=1, max_value=9)
    assert len(session.array) == 5
    assert target in session.array


def test_bounds_follow_algorithm_and_length(session):
    assert session.bounds() == (1, 4)
    session.select_algorithm("linear")
    assert session.bounds() == (1, 6)
    session.set_array([])
    assert session.bounds() == (0, 0)


def test_empty_array_run(session):
    session.set_array([])
    session.start(1)
    step, has_more = session.step()
    assert not has_more
    assert step.outcome.index == -1
    assert session.stats.comparisons == 0


def test_session_logs_finish(session, caplog):
    caplog.set_level(logging.INFO, logger="StepSearch")
    session.start(11)
    session.play(0)
    assert "binary finished: Found at index 5" in caplog.text

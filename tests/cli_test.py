import io
import os
import tempfile
import pytest
from unittest.mock import patch
from stepsearch.cli import main, render_step, run_search
from stepsearch.search.base import Outcome, SearchStep


CONFIG_TEMPLATE = (
    "[VISUALIZER]\nALGORITHM = {algorithm}\nSPEED_MS = {speed_ms}\nMIN_ARRAY_LENGTH = 1\nMAX_ARRAY_LENGTH = 40\n\n"
    "[RANDOM]\nMIN_LENGTH = 8\nMAX_LENGTH = 8\nMIN_VALUE = 1\nMAX_VALUE = 20\nSEED = 11\n\n"
    "[LOGGING]\nLEVEL = WARNING\nFILE =\n"
)


def write_config(path, algorithm="binary", speed_ms=0):
    with open(path, 'w') as f:
        f.write(CONFIG_TEMPLATE.format(algorithm=algorithm, speed_ms=speed_ms))
    return path


@pytest.fixture
def config_file():
    temp_dir = tempfile.TemporaryDirectory()
    yield write_config(os.path.join(temp_dir.name, "visualizer.conf"))
    temp_dir.cleanup()


def test_render_comparison_step():
    step = SearchStep((1, 3, 5), (1,), 2)
    assert render_step(step) == "1 [3] 5   comparisons=2"


def test_render_found_step():
    step = SearchStep((1, 3, 5), (), 2, Outcome.found(2))
    assert render_step(step) == "1 3 *5*   comparisons=2"


def test_render_empty_snapshot():
    step = SearchStep((), (), 0, Outcome.not_found())
    assert render_step(step) == "(empty)   comparisons=0"


def test_list_algorithms():
    out = io.StringIO()
    assert main(["--list"], out=out) == 0
    text = out.getvalue()
    for identifier in ("linear", "binary", "jump", "interpolation", "exponential"):
        assert identifier in text
    assert "How it works:" in text


def test_run_with_explicit_array(config_file):
    out = io.StringIO()
    status = main(["--config", config_file, "--array", "11,3,9,1,7,5", "--target", "7"], out=out)

    assert status == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "Binary Search: searching for 7"
    assert lines[1] == "1 3 [5] 7 9 11   comparisons=1"
    assert lines[4] == "1 3 5 *7* 9 11   comparisons=3"
    assert "Comparisons: 3" in lines
    assert "Min comparisons: 1" in lines
    assert "Max comparisons: 4" in lines
    assert "Result: Found at index 3" in lines


def test_algorithm_flag_overrides_config(config_file):
    out = io.StringIO()
    main(["--config", config_file, "--algorithm", "linear", "--array", "4,8", "--target", "5"], out=out)
    text = out.getvalue()
    assert text.startswith("Linear Search: searching for 5")
    assert "Result: Not found" in text


def test_random_array_uses_seed(config_file):
    first, second = io.StringIO(), io.StringIO()
    assert main(["--config", config_file], out=first) == 0
    assert main(["--config", config_file], out=second) == 0
    assert first.getvalue().splitlines()[:-5] == second.getvalue().splitlines()[:-5]
    assert "Result: Found at index" in first.getvalue()


def test_invalid_target_exits_with_error(config_file):
    out = io.StringIO()
    assert main(["--config", config_file, "--array", "1,2", "--target", "x"], out=out) == 2
    assert out.getvalue() == ""


def test_missing_target_for_explicit_array(config_file):
    assert main(["--config", config_file, "--array", "1,2"], out=io.StringIO()) == 2


def test_missing_config_file():
    assert main(["--config", "does-not-exist.conf"], out=io.StringIO()) == 2


@pytest.mark.parametrize("speed", ["-5", "5001"])
def test_speed_out_of_range_is_rejected(config_file, speed):
    out = io.StringIO()
    status = main(["--config", config_file, "--array", "1,2", "--target", "1", "--speed", speed], out=out)
    assert status == 2
    assert out.getvalue() == ""


def test_runs_must_be_positive(config_file):
    assert main(["--config", config_file, "--runs", "0"], out=io.StringIO()) == 2


def test_runs_reload_configuration_between_searches(config_file):
    out = io.StringIO()

    def run_then_switch_algorithm(args, config, out):
        status = run_search(args, config, out)
        write_config(config_file, algorithm="linear")
        return status

    with patch("stepsearch.cli.run_search", side_effect=run_then_switch_algorithm):
        status = main(["--config", config_file, "--array", "1,3,5", "--target", "5", "--runs", "2"], out=out)

    assert status == 0
    text = out.getvalue()
    assert text.startswith("Binary Search: searching for 5")
    assert "\nLinear Search: searching for 5" in text
    assert text.count("Result: Found at index 2") == 2


def test_runs_keep_settings_when_reload_fails(config_file, caplog):
    out = io.StringIO()

    def run_then_break_config(args, config, out):
        status = run_search(args, config, out)
        write_config(config_file, speed_ms=99999, algorithm="linear")
        return status

    with patch("stepsearch.cli.run_search", side_effect=run_then_break_config):
        status = main(["--config", config_file, "--array", "1,3,5", "--target", "5", "--runs", "2"], out=out)

    assert status == 0
    assert out.getvalue().count("Binary Search: searching for 5") == 2
    assert "Failed to reload configuration" in caplog.text

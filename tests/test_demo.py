import io
import re

import pytest

from bintree.demo import main, run_demo

SEVEN_16 = (
    "       .-------(098)-------.\n"
    "  .--(012)--.         .--(402)--.\n"
    "(006)     (016)     (256)     (512)\n"
)
SEVEN_56 = SEVEN_16.replace("(016)", "(056)")
SMALL = "  .--(098)--.\n(012)     (402)\n"


def _output(number: int) -> str:
    buffer = io.StringIO()
    run_demo(number, buffer)
    return buffer.getvalue()


def _labels_by_column(text: str) -> list:
    positions = []
    for line in text.splitlines():
        positions.extend((m.start(), int(m.group(1))) for m in re.finditer(r"\((\d+)\)", line))
    return [value for _, value in sorted(positions)]


def test_demo_0_prints_tree():
    assert _output(0) == SEVEN_16


@pytest.mark.parametrize("number", [1, 2])
def test_growth_demos_print_before_and_after(number):
    out = _output(number)
    assert out.startswith(SMALL + "\n")
    after = out[len(SMALL) + 1:]
    assert len(after.splitlines()) == 3
    assert _labels_by_column(after) == [12, 54, 98, 128, 402]


@pytest.mark.parametrize(
    "number, expected",
    [
        (6, [98, 12, 6, 56, 402, 256, 512]),
        (7, [6, 12, 56, 98, 256, 402, 512]),
        (8, [6, 56, 12, 256, 512, 402, 98]),
    ],
)
def test_traversal_demos(number, expected):
    out = _output(number)
    assert out.startswith(SEVEN_56)
    assert out[len(SEVEN_56):].splitlines() == [str(v) for v in expected]


def test_demo_9_reports_root_height():
    lines = _output(9).splitlines()
    assert lines[-3] == "Height from 98: 2"
    assert sum(line.startswith("Height from") for line in lines) == 3


def test_demo_14_reports_root_balance():
    assert "Balance of 98: +2\n" in _output(14)


def test_demo_16_prints_three_trees():
    out = _output(16)
    assert out.count("(098)") == 3
    assert sum(line.startswith("Perfect: ") for line in out.splitlines()) == 3


def test_demo_17_root_has_no_sibling():
    assert _output(17).splitlines()[-1] == "Sibling of 98: (nil)"


def test_demo_18_reports_three_uncles():
    uncles = [line for line in _output(18).splitlines() if line.startswith("Uncle of ")]
    assert len(uncles) == 3
    assert uncles[-1].endswith("(nil)")


@pytest.mark.parametrize("number", [-1, 19, 100])
def test_unknown_demo_raises(number):
    with pytest.raises(ValueError):
        run_demo(number, io.StringIO())


def test_main_runs_demo(capsys):
    assert main(["4"]) == 0
    assert capsys.readouterr().out == _output(4)


def test_main_rejects_unknown_number(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["99"])
    assert excinfo.value.code == 2
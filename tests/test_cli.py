import pytest

from istree.cli import main


def test_reports_time(capsys):
    assert main(["-n", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Time taken: ")
    assert out.rstrip().endswith("seconds")


def test_print_ists(capsys):
    assert main(["-n", "3", "--print-ists"]) == 0
    out = capsys.readouterr().out
    assert "\nIST T1:\n" in out
    assert "\nIST T2:\n" in out
    assert "132 -> 312" in out
    assert "IST T3:" not in out


def test_level_order(capsys):
    assert main(["-n", "3", "--level-order"]) == 0
    out = capsys.readouterr().out
    assert "Level-order traversal of IST T1:\n1 2 3 | \n" in out
    assert "Level-order traversal of IST T2:" in out


def test_sizes(capsys):
    assert main(["-n", "4", "--sizes", "-w", "2"]) == 0
    out = capsys.readouterr().out
    assert "Sizes of gathered ISTs:" in out
    assert out.count(" entries") == 3
    assert "  T1: 23 entries" in out


@pytest.mark.parametrize("argv", [["-n", "1"], ["-n", "3", "-w", "0"], ["-n", "x"]])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2
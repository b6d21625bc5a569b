import logging

import pytest

from temperaments.cli import main


def test_edo_table(capsys):
    assert main(["edo", "12", "--ref-freq", "261.625"]) == 0
    out = capsys.readouterr().out
    assert "P5\t3:2" in out
    assert "523.25" in out


def test_placed_mode(capsys):
    main(["--placed", "edo", "19"])
    out = capsys.readouterr().out
    assert "Steps" not in out
    assert "2:1" in out


def test_cents_mode(capsys):
    main(["--cents", "--decimals", "3", "orwell", "9", "7-31"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "0.000"
    assert lines[-1] == "1200.000"


@pytest.mark.parametrize("argv", [["carlos", "g"], ["carlos", "g3va"], ["orwell", "13", "12-53"], ["partch"]])
def test_families(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out.startswith("Steps")


def test_carlos_sweep(capsys):
    main(["carlos", "q"])
    assert capsys.readouterr().out.startswith("5ths")


def test_carlos_custom(capsys):
    main(["--ascending", "carlos", "custom", "--weights", "9", "5", "4", "--steps", "17"])
    assert capsys.readouterr().out.splitlines()[1].startswith("0\t")


@pytest.mark.parametrize("argv", [
    ["edo", "0"],
    ["orwell", "0"],
    ["carlos", "custom", "--weights", "0", "0", "0", "--steps", "5"],
    ["carlos", "custom"],
    ["orwell", "9", "5-17"],
    ["--decimals", "-1", "edo", "12"],
    ["carlos", "a", "--weights", "1", "2", "3", "--steps", "9"],
    ["carlos", "q", "--steps", "9"],
])
def test_rejected_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_verbose_logs_placements(caplog, capsys):
    caplog.set_level(logging.DEBUG)
    main(["edo", "12"])
    assert not [r for r in caplog.records if r.name.startswith("temperaments") and r.levelno == logging.DEBUG]
    caplog.clear()
    main(["-v", "edo", "12"])
    messages = [r.getMessage() for r in caplog.records if r.name == "temperaments.placement"]
    assert any(m.startswith("placing ratio 3:2") for m in messages)

"""
Tests for the command-line interface.
"""

import json
import textwrap

import pytest

from mentorship_engine.cli import main


def test_info(capsys):
    main(["info"])
    out = capsys.readouterr().out
    assert "Default LadderParameters:" in out
    assert "die_sides: 10" in out
    assert "success_probability: 0.10" in out


def test_ladder(capsys):
    main(["ladder"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 5
    assert "Apprentice" in out[0] and "must pass qualification" in out[0]
    assert "Grandmaster" in out[-1] and "highest rank" in out[-1]


def test_run_default_prints_transcript(capsys):
    main(["run", "--seed", "4"])
    out = capsys.readouterr().out
    assert "--- Practitioner Information ---" in out
    assert "Practitioner: Aldwin" in out
    assert "The assembly remains unaware of this transaction..." in out


def test_run_json(tmp_path, capsys):
    path = tmp_path / "tiny.yaml"
    path.write_text(textwrap.dedent("""
        practitioners:
          - {identity: Mira, rank: Senior}
          - {identity: Theron, has_qualified: true}
        steps:
          - {op: assign, mentor: Mira, apprentice: Theron}
          - {op: graduate, mentor: Mira, apprentice: Theron}
    """), encoding="utf-8")
    main(["run", "--scenario", str(path), "--json", "--seed", "1"])
    stats = json.loads(capsys.readouterr().out)
    assert stats["scenario"] == "tiny"
    assert stats["seed"] == 1
    assert stats["total_graduations"] == 1
    assert stats["rank_counts"]["Adept"] == 1


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit):
        main([])

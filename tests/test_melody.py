import io

import pytest

from dsakit.melody import TuneHierarchy, main, melody_score, parse_melody

LINES = ["root: a b", "a: c d", "b: e"]


@pytest.fixture
def hierarchy():
    return TuneHierarchy.from_lines(LINES)


def test_levels(hierarchy):
    assert hierarchy.level("root") == 0
    assert hierarchy.level("a") == hierarchy.level("b") == 1
    assert hierarchy.level("c") == hierarchy.level("e") == 2


def test_unreachable_and_unknown(hierarchy):
    h = TuneHierarchy.from_lines(["root: a", "x: y"])
    assert h.level("x") == -1
    assert "y" in h
    assert "zzz" not in hierarchy
    with pytest.raises(KeyError):
        hierarchy.level("zzz")


def test_empty_hierarchy_rejected():
    with pytest.raises(ValueError):
        TuneHierarchy.from_lines([])


def test_parse_melody():
    assert parse_melody("a-b-c") == ["a", "b", "c"]
    assert parse_melody("a-") == ["a"]
    assert parse_melody("") == []


def test_identical_melodies_score_full_match(hierarchy):
    melody = ["a", "c", "e"]
    assert melody_score(hierarchy, melody, melody, 5, 3, 2) == 5 * len(melody)


def test_same_level_counts_as_match(hierarchy):
    assert melody_score(hierarchy, ["a"], ["b"], 4, 1, 10) == 4


def test_mismatch_beats_two_gaps(hierarchy):
    assert melody_score(hierarchy, ["a"], ["c"], 4, 1, 10) == -1


def test_unknown_notes_only_skip(hierarchy):
    gap = 3
    assert melody_score(hierarchy, ["x"], ["y"], 5, 1, gap) == -2 * gap


def test_empty_melodies(hierarchy):
    gap = 2
    assert melody_score(hierarchy, [], [], 5, 1, gap) == 0
    assert melody_score(hierarchy, ["a", "b", "c"], [], 5, 1, gap) == -3 * gap


def test_main_reads_stdin(monkeypatch, capsys):
    text = "3\n" + "\n".join(LINES) + "\na-c-e\na-c-e\n5 3 2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == str(5 * 3)
"""Tests for the terminal menu, driven through a scripted input()."""

import pytest

import engine
from engine import Subject, input_subject, main, prompt_float, prompt_int


@pytest.fixture
def typed(monkeypatch):
    """Feeds the given answers to input() one at a time."""

    def feed(*answers):
        answers_iter = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers_iter))

    return feed


def test_prompt_int_reasks_until_in_range(typed, capsys):
    typed("abc", "11", "7")

    assert prompt_int("n: ", 1, 10) == 7
    out = capsys.readouterr().out
    assert "whole number (1-10)" in out
    assert "from 1 to 10" in out


def test_prompt_int_default_on_enter(typed):
    typed("")

    assert prompt_int("n: ", 1, 10, default=5) == 5


def test_prompt_float(typed):
    typed("lots", "30", "2.5")

    assert prompt_float("h: ", 0.5, 24.0) == 2.5


def test_input_subject_rejects_duplicate_name_and_needs_a_topic(typed, capsys):
    typed("Math", "", "Physics", "8", "", "", "waves", "optics", "")

    s = input_subject(["Math"])

    assert s == Subject("Physics", 8, 5, ["waves", "optics"])
    out = capsys.readouterr().out
    assert "already a subject called Math" in out
    assert "Subject name cannot be empty." in out
    assert "at least one topic" in out


def _day_lines(text, day):
    return [line for line in text.splitlines() if line.startswith(f"Day {day} (")]


def test_filter_switch_reuses_highlights_from_generation(typed, capsys):
    typed(
        "4", "2", "1",                      # 2 days x 1h
        "1", "A", "10", "1", "x", "",       # A: difficulty 10
        "1", "B", "1", "10", "y", "",       # B: difficulty 1, same weight
        "5", "2",                           # difficulty only
        "6",                                # generate
        "2", "1",                           # remove A
        "5", "2",                           # same filter again
        "9",
    )

    main()
    out = capsys.readouterr().out

    # once when generated, once after switching the filter
    assert _day_lines(out, 1) == ["Day 1 (1h)  <- Highest Difficulty sum"] * 2
    assert _day_lines(out, 2) == ["Day 2 (1h)"] * 2
    assert "Removed: A" in out


def test_filter_switch_after_regenerating_uses_new_subjects(typed, capsys):
    typed(
        "4", "2", "1",
        "1", "A", "10", "1", "x", "",
        "1", "B", "1", "10", "y", "",
        "6",
        "2", "1",
        "6",                                # only B now: both days tie
        "5", "2",
        "9",
    )

    main()
    out = capsys.readouterr().out

    assert _day_lines(out, 2)[-1] == "Day 2 (1h)  <- Highest Difficulty sum"


def test_generate_needs_subjects(typed, capsys):
    typed("6", "7", "9")

    main()
    out = capsys.readouterr().out

    assert "Please add at least one subject." in out
    assert "Generate a schedule first." in out


def test_save_csv_from_menu(typed, tmp_path):
    path = tmp_path / "plan.csv"
    typed(
        "4", "1", "2",
        "1", "Chem", "5", "5", "acids", "",
        "6",
        "7", str(path),
        "9",
    )

    main()

    assert path.read_text(encoding="utf-8").splitlines() == [
        "Day,Subject,Topic,Time",
        "1,Chem,acids,2h",
    ]


def test_clear_drops_subjects_and_schedule(typed, capsys):
    typed(
        "1", "Chem", "5", "5", "acids", "",
        "6",
        "8",
        "7",
        "3",
        "9",
    )

    main()
    out = capsys.readouterr().out

    assert "Cleared subjects and schedule." in out
    assert "Generate a schedule first." in out
    assert "No subjects yet." in out


def test_menu_filter_choices_cover_every_filter():
    assert set(engine.FILTER_CHOICES.values()) == set(engine.HighlightFilter)

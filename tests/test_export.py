"""Tests for time strings, CSV export and subject (de)serialization."""

import pytest

from engine import (
    Subject,
    Task,
    as_whole_number,
    format_time,
    generate_schedule,
    parse_time,
    save_schedule_csv,
    schedule_from_csv,
    schedule_to_csv,
    subject_from_dict,
    subject_to_dict,
    validate_settings,
    validate_subject,
)


@pytest.mark.parametrize(
    "hours,text",
    [
        (0.75, "45 min"),
        (2.0, "2h"),
        (1.25, "1h 15m"),
        (1.05, "1h 03m"),
        (0.0, "0h"),
        (0.999, "1h"),
        (10 / 3, "3h 20m"),
    ],
)
def test_format_time(hours, text):
    assert format_time(hours) == text


@pytest.mark.parametrize("text,hours", [("45 min", 0.75), ("2h", 2.0), ("1h 03m", 1.05)])
def test_parse_time(text, hours):
    assert parse_time(text) == pytest.approx(hours)


@pytest.mark.parametrize("text", ["", "soon", "h", "1x 30m"])
def test_parse_time_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_csv_layout():
    schedule = [[Task("Math", "limits", 1.5)], [], [Task("Art", "color, light", 0.5)]]

    assert schedule_to_csv(schedule).splitlines() == [
        "Day,Subject,Topic,Time",
        "1,Math,limits,1h 30m",
        '3,Art,"color, light",30 min',
    ]


def test_csv_round_trip_keeps_day_subject_topic(week_subjects):
    schedule = generate_schedule(week_subjects, days=7, hours_per_day=3.5)

    parsed = schedule_from_csv(schedule_to_csv(schedule), days=7)

    assert len(parsed) == 7
    for original, restored in zip(schedule, parsed):
        assert [(t.subject, t.topic) for t in restored] == [(t.subject, t.topic) for t in original]
        for a, b in zip(original, restored):
            assert b.hours == pytest.approx(a.hours, abs=1 / 60)


def test_csv_trailing_empty_days_need_day_count():
    text = "Day,Subject,Topic,Time\n1,Math,limits,2h\n"

    assert len(schedule_from_csv(text)) == 1
    assert schedule_from_csv(text, days=3)[1:] == [[], []]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Date,Subject,Topic,Time\n",
        "Day,Subject,Topic,Time\n1,Math,2h\n",
        "Day,Subject,Topic,Time\n0,Math,limits,2h\n",
    ],
)
def test_csv_rejects_bad_input(text):
    with pytest.raises(ValueError):
        schedule_from_csv(text)


def test_save_schedule_csv(tmp_path):
    path = tmp_path / "study_schedule.csv"
    save_schedule_csv(str(path), [[Task("Math", "limits", 2.0)]])

    assert path.read_text(encoding="utf-8") == "Day,Subject,Topic,Time\n1,Math,limits,2h\n"


def test_subject_from_dict_accepts_topic_lines():
    s = subject_from_dict({"name": " Physics ", "difficulty": "7", "importance": 4, "topics": "waves\n\n optics \n"})

    assert s == Subject("Physics", 7, 4, ["waves", "optics"])
    assert subject_to_dict(s) == {"name": "Physics", "difficulty": 7, "importance": 4, "topics": ["waves", "optics"]}


def test_validate_subject():
    assert validate_subject(Subject("Chem", 5, 5, ["acids"])) == []

    errors = validate_subject(Subject(" ", 0, 11, []))
    assert len(errors) == 4


def test_validate_settings():
    assert validate_settings(14, 4.0) == []
    assert validate_settings(366, 4.0) == ["Days must be 1-365."]
    assert len(validate_settings(0, 0.25)) == 2


@pytest.mark.parametrize("value,expected", [(7, 7), (7.0, 7), ("7", 7), (" 3 ", 3)])
def test_as_whole_number(value, expected):
    assert as_whole_number(value) == expected


@pytest.mark.parametrize("value", [3.9, "3.9", True, False, "three"])
def test_as_whole_number_rejects_non_integral(value):
    with pytest.raises(ValueError):
        as_whole_number(value)


def test_subject_from_dict_rejects_fractional_rating():
    with pytest.raises(ValueError):
        subject_from_dict({"name": "Physics", "difficulty": 6.5, "importance": 4, "topics": ["waves"]})

"""
Study Schedule Engine (Python Core)

This file contains the "brain" of the study planner.
It does math + logic. The core functions never print or prompt.

Pipeline:
• allocate()            -> hour budget per subject (weighted split)
• distribute()          -> day-by-day list of study tasks
• analyze_highlights()  -> which days / subjects stand out, and why

The menu at the bottom (python engine.py) and the Flask API in app.py
only CALL these functions and render what they return.
"""

# ----------------------------
# IMPORTS
# ----------------------------

import csv
import io
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from loguru import logger

# ----------------------------
# CONSTANTS
# ----------------------------

# One tolerance for every "is this basically zero / basically full" check.
EPSILON = 0.01

PLACEHOLDER_TOPIC = "Topic"

DEFAULT_DAYS = 14
DEFAULT_HOURS_PER_DAY = 4.0
MAX_DAYS = 365
MIN_HOURS_PER_DAY = 0.5
MAX_HOURS_PER_DAY = 24.0

MIN_RATING = 1
MAX_RATING = 10

CSV_HEADER = ["Day", "Subject", "Topic", "Time"]

# ----------------------------
# DATA MODELS
# ----------------------------

@dataclass
class Subject:
    name: str                                        # Unique within one run
    difficulty: int                                  # 1–10
    importance: int                                  # 1–10
    topics: List[str] = field(default_factory=list)  # Studied in this order, cyclically
    remaining_hours: float = 0.0                     # Working budget, only used while scheduling

    @property
    def topic_count(self) -> int:
        return len(self.topics)

    @property
    def weight(self) -> int:
        # A subject with no topics still counts as one topic
        return self.difficulty * self.importance * max(1, self.topic_count)

    def topic_at(self, cursor: int) -> str:
        if not self.topics:
            return PLACEHOLDER_TOPIC
        return self.topics[cursor % len(self.topics)]


# Task is ONE block of study on ONE day. Frozen: never changed after it is made.
@dataclass(frozen=True)
class Task:
    subject: str
    topic: str
    hours: float


# A schedule is a list of days; each day is a list of tasks.
Schedule = List[List[Task]]


class HighlightReason(Enum):
    DIFFICULTY = "difficulty"
    TOPICS = "topics"
    HOURS = "hours"


class HighlightFilter(Enum):
    ALL = "all"
    DIFFICULTY_ONLY = "difficulty"
    TOPICS_ONLY = "topics"
    HOURS_ONLY = "hours"


ReasonSet = FrozenSet[HighlightReason]

NO_REASONS: ReasonSet = frozenset()

# ----------------------------
# HELPERS
# ----------------------------

def snapshot_subjects(subjects: Sequence[Subject]) -> List[Subject]:
    """
    Returns fresh copies of the subjects (topic lists included).
    Scheduling only ever touches these copies, never the caller's list.
    """
    return [replace(s, topics=list(s.topics)) for s in subjects]


def ordered_reasons(reasons: ReasonSet) -> List[HighlightReason]:
    """Reasons in their declared order (DIFFICULTY, TOPICS, HOURS)."""
    return [r for r in HighlightReason if r in reasons]


def parse_filter(value: str) -> HighlightFilter:
    """
    Turns 'all' / 'difficulty' / 'topics' / 'hours' into a HighlightFilter.
    Raises ValueError for anything else.
    """
    return HighlightFilter(str(value).strip().lower())


def parse_reasons(values: Sequence[str]) -> ReasonSet:
    return frozenset(HighlightReason(str(v).strip().lower()) for v in values)

# ----------------------------
# 1) ALLOCATOR
# ----------------------------

def allocate(subjects: Sequence[Subject], days: int, hours_per_day: float) -> List[Subject]:
    """
    Splits the total study time across subjects by weight.

    INPUT:
      subjects      = the subject list (not modified)
      days          = how many days the schedule covers
      hours_per_day = study hours available each day

    PROCESS:
      1. weight = difficulty * importance * max(1, #topics)
      2. total hours = days * hours_per_day
      3. each subject gets (weight / total weight) of the total hours

    OUTPUT:
      Copies of the subjects with remaining_hours filled in.
    """
    budgeted = snapshot_subjects(subjects)

    total_weight = sum(s.weight for s in budgeted)
    total_available_hours = days * hours_per_day

    for s in budgeted:
        if total_weight > 0:
            s.remaining_hours = (s.weight / total_weight) * total_available_hours
        else:
            s.remaining_hours = 0.0

    return budgeted

# ----------------------------
# 2) DISTRIBUTOR
# ----------------------------

def distribute(subjects: Sequence[Subject], days: int, hours_per_day: float) -> Schedule:
    """
    Spreads each subject's remaining_hours into daily tasks.

    Every day starts with hours_per_day to fill. We walk the subjects in
    list order, giving each one min(time left today, its budget), and keep
    making passes until the day is full or nobody has budget left.
    Budgets carry over from day to day, so a subject drops out of the
    schedule once its hours are used up.

    Topics rotate per subject (A, B, C, A, ...) across day boundaries.
    """
    working = snapshot_subjects(subjects)
    topic_cursors = [0] * len(working)

    schedule: Schedule = [[] for _ in range(max(0, days))]

    for day in schedule:
        left = hours_per_day
        assigned_something = True

        while left > EPSILON and assigned_something:
            assigned_something = False

            for i, s in enumerate(working):
                if left <= EPSILON:
                    break
                if s.remaining_hours <= EPSILON:
                    continue

                to_assign = min(left, s.remaining_hours)
                day.append(Task(s.name, s.topic_at(topic_cursors[i]), to_assign))
                topic_cursors[i] += 1

                s.remaining_hours -= to_assign
                left -= to_assign
                assigned_something = True

    return schedule


def generate_schedule(subjects: Sequence[Subject], days: int, hours_per_day: float) -> Schedule:
    """
    Allocate + distribute in one call.

    Raises ValueError if days < 1 or hours_per_day <= 0.
    An empty subject list is fine: every day just comes back empty.
    """
    if days < 1:
        raise ValueError(f"days must be at least 1 (got {days})")
    if hours_per_day <= 0:
        raise ValueError(f"hours_per_day must be positive (got {hours_per_day})")

    budgeted = allocate(subjects, days, hours_per_day)
    schedule = distribute(budgeted, days, hours_per_day)

    task_count = sum(len(day) for day in schedule)
    logger.debug(
        f"Generated schedule: {len(budgeted)} subjects, {days} days x {hours_per_day}h, {task_count} tasks"
    )
    return schedule

# ----------------------------
# 3) HIGHLIGHT ANALYZER
# ----------------------------

def day_stats(schedule: Schedule, subjects: Sequence[Subject]) -> List[Dict[str, object]]:
    """
    Per-day totals used for highlighting:
      difficulty_sum = sum of the difficulty of every task's subject
      topic_count    = number of tasks that day
      hours_sum      = total study hours that day

    A task whose subject isn't in `subjects` counts as difficulty 1.
    """
    difficulty_by_name: Dict[str, int] = {}
    for s in subjects:
        difficulty_by_name.setdefault(s.name, s.difficulty)

    stats: List[Dict[str, object]] = []
    for day in schedule:
        stats.append({
            "difficulty_sum": sum(difficulty_by_name.get(t.subject, 1) for t in day),
            "topic_count": len(day),
            "hours_sum": sum(t.hours for t in day)
        })
    return stats


def analyze_highlights(
    schedule: Schedule, subjects: Sequence[Subject]
) -> Tuple[List[ReasonSet], List[ReasonSet]]:
    """
    Flags the "heaviest" days and the subjects studied on them.

    A day is flagged for:
      DIFFICULTY if its difficulty sum equals the highest one
      TOPICS     if its task count equals the highest one
      HOURS      if its hours are within EPSILON of the highest total

    Ties flag every tied day. An axis whose maximum is zero flags nothing,
    so a schedule of empty days has no highlights at all.

    A subject gets the union of the reasons of every day it appears on.

    OUTPUT:
      (reasons per day, reasons per subject), the second aligned with `subjects`
    """
    if not schedule:
        return [], [NO_REASONS for _ in subjects]

    stats = day_stats(schedule, subjects)

    max_difficulty = max(d["difficulty_sum"] for d in stats)
    max_topics = max(d["topic_count"] for d in stats)
    max_hours = max(d["hours_sum"] for d in stats)

    per_day: List[ReasonSet] = []
    for d in stats:
        reasons = set()
        if max_difficulty > 0 and d["difficulty_sum"] == max_difficulty:
            reasons.add(HighlightReason.DIFFICULTY)
        if max_topics > 0 and d["topic_count"] == max_topics:
            reasons.add(HighlightReason.TOPICS)
        if max_hours > 0 and abs(d["hours_sum"] - max_hours) < EPSILON:
            reasons.add(HighlightReason.HOURS)
        per_day.append(frozenset(reasons))

    names_by_day = [{t.subject for t in day} for day in schedule]

    per_subject: List[ReasonSet] = []
    for s in subjects:
        reasons = set()
        for names, day_reasons in zip(names_by_day, per_day):
            if s.name in names:
                reasons |= day_reasons
        per_subject.append(frozenset(reasons))

    return per_day, per_subject


_FILTER_AXIS = {
    HighlightFilter.DIFFICULTY_ONLY: HighlightReason.DIFFICULTY,
    HighlightFilter.TOPICS_ONLY: HighlightReason.TOPICS,
    HighlightFilter.HOURS_ONLY: HighlightReason.HOURS
}


def filter_reasons(reasons: ReasonSet, mode: HighlightFilter = HighlightFilter.ALL) -> ReasonSet:
    """
    Narrows a reason set to what the chosen filter shows.
    Returns a new set; the stored one is left alone.
    """
    if mode is HighlightFilter.ALL:
        return frozenset(reasons)

    axis = _FILTER_AXIS[mode]
    return frozenset({axis}) if axis in reasons else NO_REASONS

# ----------------------------
# 4) DISPLAY HELPERS
# ----------------------------

REASON_LABELS = {
    HighlightReason.DIFFICULTY: "Highest Difficulty sum",
    HighlightReason.TOPICS: "Most Topics covered",
    HighlightReason.HOURS: "Most Study Hours"
}

REASON_EMOJI = {
    HighlightReason.DIFFICULTY: "🔥",
    HighlightReason.TOPICS: "📚",
    HighlightReason.HOURS: "⏳"
}

_D, _T, _H = HighlightReason.DIFFICULTY, HighlightReason.TOPICS, HighlightReason.HOURS

REASON_COLORS = {
    frozenset({_D, _T, _H}): "#800080",  # Purple
    frozenset({_D, _T}): "#FF4500",      # OrangeRed
    frozenset({_D, _H}): "#FF8C00",      # DarkOrange
    frozenset({_T, _H}): "#1E90FF",      # DodgerBlue
    frozenset({_D}): "#FF0000",          # Red
    frozenset({_T}): "#FFA500",          # Orange
    frozenset({_H}): "#0000FF"           # Blue
}

PLAIN_TEXT_COLOR = "#001F3F"  # dark navy


def reasons_text(reasons: ReasonSet) -> str:
    """
    Example: {HOURS, DIFFICULTY} -> 'Highest Difficulty sum, Most Study Hours'
    """
    return ", ".join(REASON_LABELS[r] for r in ordered_reasons(reasons))


def reason_color(reasons: ReasonSet) -> Optional[str]:
    """Background color for a reason combination, or None when there is nothing to show."""
    return REASON_COLORS.get(frozenset(reasons))


def text_color_for(background: Optional[str]) -> str:
    """
    Picks readable text: white on dark backgrounds, black on light ones.
    Dark means HSL lightness below 128 (on a 0–255 scale).
    """
    if background is None:
        return PLAIN_TEXT_COLOR

    hex_value = background.lstrip("#")
    r, g, b = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
    lightness = (max(r, g, b) + min(r, g, b)) / 2
    return "#FFFFFF" if lightness < 128 else "#000000"


def format_time(hours: float) -> str:
    """
    Renders hours for people, dropping zero parts:
      0.75 -> '45 min'
      2.0  -> '2h'
      1.25 -> '1h 15m'
      1.05 -> '1h 03m'
    Minutes are rounded to the nearest whole minute.
    """
    total_minutes = int(hours * 60 + 0.5)
    h, m = divmod(total_minutes, 60)

    if h == 0 and m > 0:
        return f"{m} min"
    if m == 0:
        return f"{h}h"
    return f"{h}h {m:02d}m"


_TIME_PATTERN = re.compile(r"^\s*(?:(\d+)\s*h)?\s*(?:(\d+)\s*(?:min|m))?\s*$")


def parse_time(text: str) -> float:
    """
    Reads a format_time() string back into hours.
    Raises ValueError if the text isn't in that format.
    """
    match = _TIME_PATTERN.match(text)
    if not match or (match.group(1) is None and match.group(2) is None):
        raise ValueError(f"Unrecognized time: {text!r}")

    h = int(match.group(1) or 0)
    m = int(match.group(2) or 0)
    return h + m / 60.0


def schedule_text_bars(schedule: Schedule, blocks_per_hour: int = 2) -> List[str]:
    """
    Returns text lines like:
      Day 1 | 4.0h | ████████
    blocks_per_hour controls bar length.
    """
    lines: List[str] = []

    for i, day in enumerate(schedule, start=1):
        h = round(sum(t.hours for t in day), 2)
        blocks = int(round(h * blocks_per_hour))
        bar = "█" * blocks if blocks > 0 else ""
        lines.append(f"Day {i} | {h}h | {bar}")

    return lines


def schedule_summary(
    schedule: Schedule,
    subjects: Sequence[Subject],
    mode: HighlightFilter = HighlightFilter.ALL,
    highlights: Optional[Tuple[List[ReasonSet], List[ReasonSet]]] = None
) -> Dict[str, object]:
    """
    Creates a UI-ready payload.
    Includes:
    - Every day with its tasks, totals, stored + filtered reasons, colors
    - Every subject with scheduled hours, stored + filtered reasons, colors
    - Headline strings for highlighted days

    Pass `highlights` (what analyze_highlights returned when the schedule
    was made) to only re-apply the filter instead of analyzing again.
    """
    if highlights is None:
        highlights = analyze_highlights(schedule, subjects)
    per_day, per_subject = highlights
    stats = day_stats(schedule, subjects)

    days_out: List[Dict[str, object]] = []
    headlines: List[str] = []

    for i, (day, day_reasons, st) in enumerate(zip(schedule, per_day, stats), start=1):
        shown = filter_reasons(day_reasons, mode)
        color = reason_color(shown)
        total = round(float(st["hours_sum"]), 2)

        days_out.append({
            "day": i,
            "tasks": [task_to_dict(t) for t in day],
            "difficulty_sum": st["difficulty_sum"],
            "topic_count": st["topic_count"],
            "total_hours": total,
            "total_time": format_time(total),
            "reasons": [r.value for r in ordered_reasons(day_reasons)],
            "highlight": [r.value for r in ordered_reasons(shown)],
            "reason_text": reasons_text(shown),
            "color": color,
            "text_color": text_color_for(color)
        })

        if shown:
            emoji = "".join(REASON_EMOJI[r] for r in ordered_reasons(shown))
            headlines.append(f"{emoji} Day {i} | {format_time(total)} | {reasons_text(shown)}")

    subjects_out: List[Dict[str, object]] = []
    for s, subject_reasons in zip(subjects, per_subject):
        shown = filter_reasons(subject_reasons, mode)
        color = reason_color(shown)
        scheduled = sum(t.hours for day in schedule for t in day if t.subject == s.name)

        item = subject_to_dict(s)
        item.update({
            "weight": s.weight,
            "scheduled_hours": round(scheduled, 2),
            "reasons": [r.value for r in ordered_reasons(subject_reasons)],
            "highlight": [r.value for r in ordered_reasons(shown)],
            "reason_text": reasons_text(shown),
            "color": color,
            "text_color": text_color_for(color)
        })
        subjects_out.append(item)

    return {
        "filter": mode.value,
        "days": days_out,
        "subjects": subjects_out,
        "headlines": headlines
    }

# ----------------------------
# 5) SERIALIZATION + CSV EXPORT
# ----------------------------

def subject_to_dict(s: Subject) -> Dict[str, object]:
    return {
        "name": s.name,
        "difficulty": s.difficulty,
        "importance": s.importance,
        "topics": list(s.topics)
    }


def as_whole_number(value: object) -> int:
    """
    int() for user input that refuses to guess:
    7, 7.0 and "7" are fine; 3.9, "3.9" and True raise ValueError.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Expected a whole number, got {value!r}")
    return int(value)


def subject_from_dict(d: Dict[str, object]) -> Subject:
    """
    Builds a Subject from a dict.
    topics may be a list or one string with one topic per line; blanks are dropped.
    """
    raw_topics = d.get("topics") or []
    if isinstance(raw_topics, str):
        raw_topics = raw_topics.splitlines()

    return Subject(
        name=str(d["name"]).strip(),
        difficulty=as_whole_number(d["difficulty"]),
        importance=as_whole_number(d["importance"]),
        topics=[str(t).strip() for t in raw_topics if str(t).strip()]
    )


def task_to_dict(t: Task) -> Dict[str, object]:
    return {
        "subject": t.subject,
        "topic": t.topic,
        "hours": round(t.hours, 4),
        "time": format_time(t.hours)
    }


def schedule_to_csv(schedule: Schedule) -> str:
    """
    CSV text with header Day,Subject,Topic,Time.
    One row per task, days numbered from 1, time via format_time().
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for i, day in enumerate(schedule, start=1):
        for t in day:
            writer.writerow([i, t.subject, t.topic, format_time(t.hours)])

    return buf.getvalue()


def save_schedule_csv(path: str, schedule: Schedule) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(schedule_to_csv(schedule))


def schedule_from_csv(text: str, days: Optional[int] = None) -> Schedule:
    """
    Parses schedule_to_csv() output back into a Schedule.

    Hours come back at whole-minute precision.
    Trailing empty days aren't in the CSV; pass `days` to get them back.
    Raises ValueError on a bad header or row.
    """
    rows = list(csv.reader(io.StringIO(text)))
    if not rows or rows[0] != CSV_HEADER:
        raise ValueError("CSV must start with header Day,Subject,Topic,Time")

    parsed: List[Tuple[int, Task]] = []
    for line_no, row in enumerate(rows[1:], start=2):
        if not row:
            continue
        if len(row) != len(CSV_HEADER):
            raise ValueError(f"Line {line_no}: expected 4 fields, got {len(row)}")

        day = int(row[0])
        if day < 1:
            raise ValueError(f"Line {line_no}: day must be 1 or more")
        parsed.append((day, Task(row[1], row[2], parse_time(row[3]))))

    day_count = max([days or 0] + [d for d, _ in parsed])
    schedule: Schedule = [[] for _ in range(day_count)]
    for day, task in parsed:
        schedule[day - 1].append(task)

    return schedule

# ----------------------------
# 6) INPUT VALIDATION (for callers)
# ----------------------------

def validate_subject(s: Subject) -> List[str]:
    """
    Checks a subject the way the input forms do.
    Returns a list of problems (empty = OK).
    """
    errors: List[str] = []
    if not s.name.strip():
        errors.append("Subject name cannot be empty.")
    if not (MIN_RATING <= s.difficulty <= MAX_RATING):
        errors.append(f"Difficulty must be {MIN_RATING}-{MAX_RATING}.")
    if not (MIN_RATING <= s.importance <= MAX_RATING):
        errors.append(f"Importance must be {MIN_RATING}-{MAX_RATING}.")
    if not s.topics:
        errors.append("Please enter at least one topic.")
    return errors


def validate_settings(days: int, hours_per_day: float) -> List[str]:
    errors: List[str] = []
    if not (1 <= days <= MAX_DAYS):
        errors.append(f"Days must be 1-{MAX_DAYS}.")
    if not (MIN_HOURS_PER_DAY <= hours_per_day <= MAX_HOURS_PER_DAY):
        errors.append(f"Hours per day must be {MIN_HOURS_PER_DAY}-{MAX_HOURS_PER_DAY}.")
    return errors

# ----------------------------
# 7) TERMINAL MENU
# ----------------------------

def prompt_int(label: str, lo: int, hi: int, default: Optional[int] = None) -> int:
    while True:
        entry = input(label).strip()
        if entry == "" and default is not None:
            return default
        try:
            value = int(entry)
            if lo <= value <= hi:
                return value
            print(f"Please enter a whole number from {lo} to {hi}.")
        except ValueError:
            print(f"Please enter a whole number ({lo}-{hi}).")


def prompt_float(label: str, lo: float, hi: float, default: Optional[float] = None) -> float:
    while True:
        entry = input(label).strip()
        if entry == "" and default is not None:
            return default
        try:
            value = float(entry)
            if lo <= value <= hi:
                return value
            print(f"Please enter a number from {lo} to {hi}.")
        except ValueError:
            print("Please enter a valid number (example: 3.5).")


def input_subject(existing_names: Sequence[str]) -> Subject:
    """
    Prompts for subject info and returns a Subject.
    Re-asks until the name is unique and at least one topic is given.
    """
    while True:
        name = input("Subject name: ").strip()
        if not name:
            print("Subject name cannot be empty.")
        elif name in existing_names:
            print(f"There is already a subject called {name}.")
        else:
            break

    difficulty = prompt_int(f"Difficulty ({MIN_RATING}-{MAX_RATING}) [5]: ", MIN_RATING, MAX_RATING, default=5)
    importance = prompt_int(f"Importance ({MIN_RATING}-{MAX_RATING}) [5]: ", MIN_RATING, MAX_RATING, default=5)

    print("Topics, one per line. Empty line to finish.")
    topics: List[str] = []
    while True:
        entry = input("  topic: ").strip()
        if entry:
            topics.append(entry)
        elif topics:
            break
        else:
            print("Please enter at least one topic.")

    return Subject(name=name, difficulty=difficulty, importance=importance, topics=topics)


def print_schedule(summary: Dict[str, object]) -> None:
    for day in summary["days"]:
        marker = f"  <- {day['reason_text']}" if day["highlight"] else ""
        print(f"\nDay {day['day']} ({day['total_time']}){marker}")
        if not day["tasks"]:
            print("  (free day)")
        for t in day["tasks"]:
            print(f"  {t['subject']:<20} {t['topic']:<25} {t['time']}")

    print("\n=== SUBJECTS ===")
    for s in summary["subjects"]:
        marker = f"  <- {s['reason_text']}" if s["highlight"] else ""
        print(f"{s['name']} | weight {s['weight']} | {s['scheduled_hours']}h{marker}")

    if summary["headlines"]:
        print("\n=== HIGHLIGHTS ===")
        for line in summary["headlines"]:
            print(line)


FILTER_CHOICES = {
    "1": HighlightFilter.ALL,
    "2": HighlightFilter.DIFFICULTY_ONLY,
    "3": HighlightFilter.TOPICS_ONLY,
    "4": HighlightFilter.HOURS_ONLY
}


def main() -> None:
    """
    Interactive menu. Everything lives in memory until you quit.

    Generating stores a copy of the subjects and the highlights it found,
    so switching the filter later only re-filters those, even if subjects
    were added or removed in between.
    """
    all_subjects: List[Subject] = []
    days = DEFAULT_DAYS
    hours_per_day = DEFAULT_HOURS_PER_DAY
    current_filter = HighlightFilter.ALL

    last_schedule: Schedule = []
    last_subjects: List[Subject] = []
    last_highlights: Tuple[List[ReasonSet], List[ReasonSet]] = ([], [])

    while True:
        print("\n===== Study Schedule Menu =====")
        print(f"({len(all_subjects)} subjects | {days} days x {hours_per_day}h | filter: {current_filter.value})")
        print("1) Add subject")
        print("2) Remove subject")
        print("3) List subjects")
        print("4) Set days / hours per day")
        print("5) Set highlight filter")
        print("6) Generate schedule")
        print("7) Save CSV")
        print("8) Clear everything")
        print("9) Quit")

        choice = input("Choose an option (1-9): ").strip()

        # ---------------- ADD ----------------
        if choice == "1":
            new_s = input_subject([s.name for s in all_subjects])
            all_subjects.append(new_s)
            print(f"Added: {new_s.name} ({new_s.topic_count} topics)")

        # ---------------- REMOVE ----------------
        elif choice == "2":
            if not all_subjects:
                print("No subjects to remove.")
                continue

            for i, s in enumerate(all_subjects, start=1):
                print(f"{i}) {s.name}")

            idx = prompt_int("Enter number to remove: ", 1, len(all_subjects))
            removed = all_subjects.pop(idx - 1)
            print(f"Removed: {removed.name}")

        # ---------------- LIST ----------------
        elif choice == "3":
            if not all_subjects:
                print("No subjects yet.")
                continue

            for s in all_subjects:
                print(
                    f"{s.name} | difficulty {s.difficulty} | importance {s.importance} | "
                    f"{s.topic_count} topics: {', '.join(s.topics)}"
                )

        # ---------------- SETTINGS ----------------
        elif choice == "4":
            days = prompt_int(f"Days (1-{MAX_DAYS}) [{days}]: ", 1, MAX_DAYS, default=days)
            hours_per_day = prompt_float(
                f"Hours per day ({MIN_HOURS_PER_DAY}-{MAX_HOURS_PER_DAY}) [{hours_per_day}]: ",
                MIN_HOURS_PER_DAY, MAX_HOURS_PER_DAY, default=hours_per_day
            )

        # ---------------- FILTER ----------------
        elif choice == "5":
            print("1) All (combined)  2) Difficulty only  3) Topics only  4) Hours only")
            pick = input("Filter: ").strip()
            if pick in FILTER_CHOICES:
                current_filter = FILTER_CHOICES[pick]
                if last_schedule:
                    print_schedule(
                        schedule_summary(last_schedule, last_subjects, current_filter, last_highlights)
                    )
            else:
                print("Please choose 1-4.")

        # ---------------- GENERATE ----------------
        elif choice == "6":
            if not all_subjects:
                print("Please add at least one subject.")
                continue

            last_subjects = snapshot_subjects(all_subjects)
            last_schedule = generate_schedule(last_subjects, days, hours_per_day)
            last_highlights = analyze_highlights(last_schedule, last_subjects)
            print_schedule(schedule_summary(last_schedule, last_subjects, current_filter, last_highlights))

        # ---------------- SAVE CSV ----------------
        elif choice == "7":
            if not last_schedule:
                print("Generate a schedule first.")
                continue

            path = input("File name [study_schedule.csv]: ").strip() or "study_schedule.csv"
            try:
                save_schedule_csv(path, last_schedule)
                print(f"Schedule saved to {path}")
            except OSError as e:
                logger.error(f"Could not save {path}: {e}")
                print("Could not save file.")

        # ---------------- CLEAR ----------------
        elif choice == "8":
            all_subjects.clear()
            last_schedule = []
            last_subjects = []
            last_highlights = ([], [])
            print("Cleared subjects and schedule.")

        # ---------------- QUIT ----------------
        elif choice == "9":
            print("Goodbye.")
            break

        else:
            print("Please choose a number from 1 to 9.")


if __name__ == "__main__":
    from logger_setup import setup_logger

    setup_logger()
    main()

from flask import Flask, Response, request, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_cors import CORS
from loguru import logger

from config import Config
from logger_setup import setup_logger
from engine import (
    DEFAULT_DAYS,
    DEFAULT_HOURS_PER_DAY,
    as_whole_number,
    filter_reasons,
    generate_schedule,
    ordered_reasons,
    parse_filter,
    parse_reasons,
    schedule_summary,
    schedule_text_bars,
    schedule_to_csv,
    subject_from_dict,
    validate_settings,
    validate_subject,
)

setup_logger()

app = Flask(__name__)
app.config.from_object(Config)

# Allow web + iOS clients (lock down with CORS_ORIGINS)
CORS(app, resources={r"/api/*": {"origins": Config.CORS_ORIGINS}})

limiter = Limiter(
    get_remote_address,
    app=app,
    default_limits=[Config.RATELIMIT_DEFAULT],
    storage_uri=Config.RATELIMIT_STORAGE_URI,
)


# ----------------------------
# HELPERS
# ----------------------------
def read_schedule_request(data):
    """
    Pulls (subjects, days, hours_per_day, filter) out of a JSON body.
    Raises ValueError with a message fit for the client.
    """
    if not isinstance(data, dict):
        raise ValueError("JSON object required")

    raw_subjects = data.get("subjects") or []
    if not isinstance(raw_subjects, list) or not raw_subjects:
        raise ValueError("Please add at least one subject.")
    if len(raw_subjects) > Config.MAX_SUBJECTS:
        raise ValueError(f"At most {Config.MAX_SUBJECTS} subjects per schedule.")

    subjects = []
    seen = set()
    for i, item in enumerate(raw_subjects, start=1):
        try:
            s = subject_from_dict(item)
        except (KeyError, TypeError, ValueError, AttributeError):
            raise ValueError(f"subject {i}: name, topics and whole-number difficulty and importance are required")

        problems = validate_subject(s)
        if problems:
            raise ValueError(f"subject {i}: {' '.join(problems)}")
        if s.name in seen:
            raise ValueError(f"subject {i}: duplicate name {s.name!r}")

        seen.add(s.name)
        subjects.append(s)

    raw_hours = data.get("hours_per_day", DEFAULT_HOURS_PER_DAY)
    try:
        days = as_whole_number(data.get("days", DEFAULT_DAYS))
        if isinstance(raw_hours, bool):
            raise TypeError("hours_per_day cannot be true/false")
        hours_per_day = float(raw_hours)
    except (TypeError, ValueError):
        raise ValueError("days must be a whole number and hours_per_day a number")

    problems = validate_settings(days, hours_per_day)
    if problems:
        raise ValueError(" ".join(problems))

    try:
        mode = parse_filter(data.get("filter", "all"))
    except ValueError:
        raise ValueError("filter must be one of all, difficulty, topics, hours")

    return subjects, days, hours_per_day, mode


# ----------------------------
# API
# ----------------------------
@app.get("/api/health")
def health():
    return jsonify({"ok": True})


@app.post("/api/schedule")
@limiter.limit("120 per hour")
def api_schedule():
    try:
        subjects, days, hours_per_day, mode = read_schedule_request(request.get_json(force=True))
    except ValueError as e:
        logger.warning(f"Rejected schedule request: {e}")
        return jsonify({"error": str(e)}), 400

    schedule = generate_schedule(subjects, days, hours_per_day)
    summary = schedule_summary(schedule, subjects, mode)
    logger.info(f"Schedule generated for {len(subjects)} subjects over {days} days")

    return jsonify({
        "settings": {
            "days": days,
            "hours_per_day": hours_per_day,
            "filter": mode.value
        },
        "days": summary["days"],
        "subjects": summary["subjects"],
        "headlines": summary["headlines"],
        "bars": schedule_text_bars(schedule)
    })


@app.post("/api/schedule.csv")
@limiter.limit("60 per hour")
def api_schedule_csv():
    try:
        subjects, days, hours_per_day, _ = read_schedule_request(request.get_json(force=True))
    except ValueError as e:
        logger.warning(f"Rejected CSV request: {e}")
        return jsonify({"error": str(e)}), 400

    schedule = generate_schedule(subjects, days, hours_per_day)
    return Response(
        schedule_to_csv(schedule),
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=study_schedule.csv"}
    )


@app.post("/api/highlights/filter")
def api_filter_highlights():
    data = request.get_json(force=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400

    try:
        reasons = parse_reasons(data.get("reasons") or [])
        mode = parse_filter(data.get("filter", "all"))
    except (TypeError, ValueError):
        return jsonify({"error": "reasons must be difficulty/topics/hours and filter one of all, difficulty, topics, hours"}), 400

    shown = filter_reasons(reasons, mode)
    return jsonify({
        "filter": mode.value,
        "reasons": [r.value for r in ordered_reasons(shown)]
    })


if __name__ == "__main__":
    app.run(debug=True)

"""Shared fixtures for the schedule engine and API tests."""

import os

import pytest

# Must be set before app.py / config.py are imported
os.environ.setdefault("RATELIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from engine import Subject  # noqa: E402


@pytest.fixture
def two_subjects() -> list[Subject]:
    """A heavier subject with two topics and a light one with a single topic."""
    return [
        Subject(name="A", difficulty=2, importance=2, topics=["t1", "t2"]),
        Subject(name="B", difficulty=1, importance=1, topics=["t1"]),
    ]


@pytest.fixture
def week_subjects() -> list[Subject]:
    """Weights 24 and 10 over a 7 x 3.5h week."""
    return [
        Subject(name="Calculus", difficulty=3, importance=4, topics=["limits", "series"]),
        Subject(name="History", difficulty=5, importance=2, topics=["rome"]),
    ]


@pytest.fixture
def client():
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c

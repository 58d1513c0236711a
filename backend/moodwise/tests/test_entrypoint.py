"""
Tests for the ``python -m moodwise`` entry point.
"""
import uvicorn
from moodwise import __main__ as entrypoint
from moodwise.core.config import settings


def test_main_runs_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    entrypoint.main()

    args, kwargs = calls[0]
    assert args == ("moodwise.main:app",)
    assert kwargs["host"] == settings.HOST
    assert kwargs["port"] == settings.PORT

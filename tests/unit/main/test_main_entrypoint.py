from __future__ import annotations

import runpy


def test_main_module_starts_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setenv("APP_PORT", "9100")
    monkeypatch.setattr("uvicorn.run", fake_run)

    runpy.run_module("src.main.__main__", run_name="__main__")

    assert calls["app"] == "src.main.app:app"
    assert calls["port"] == 9100
    assert calls["reload"] is False

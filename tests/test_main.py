# tests/test_main.py

from restservice import main


def test_run_serves_app_with_configured_address(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(main.uvicorn, "run", fake_run)
    monkeypatch.setattr(main.default_settings, "PORT", 9999)

    main.run()

    assert calls["app"] is main.app
    assert calls["host"] == main.default_settings.HOST
    assert calls["port"] == 9999
    assert calls["log_level"] == main.default_settings.LOG_LEVEL.lower()


def test_greeting_route_registered():
    assert "/greeting" in main.app.openapi()["paths"]

import locale

from flask import Flask

import app as app_module
from app import create_app, print_qr
from config import ServerConfig


def test_index_serves_browser_ui(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"LAN File Drop" in resp.data
    assert b"/api/files" in resp.data


def test_index_falls_back_when_ui_missing(tmp_path):
    settings = ServerConfig(upload_dir=tmp_path / "u", static_dir=tmp_path / "no-ui", show_qr=False)
    client = create_app(settings).test_client()

    resp = client.get("/")

    assert resp.status_code == 200
    assert b"index.html missing" in resp.data


def test_create_app_creates_storage_and_sets_limit(settings):
    flask_app = create_app(settings)

    assert settings.upload_dir.is_dir()
    assert flask_app.config["MAX_CONTENT_LENGTH"] == settings.max_content_length


def test_print_qr_writes_to_terminal(capsys):
    print_qr("http://192.168.1.20:3001")

    out = capsys.readouterr().out
    assert len(out.splitlines()) > 10


def test_use_host_locale_selects_environment_locale(monkeypatch):
    calls = []
    monkeypatch.setattr(app_module.locale, "setlocale", lambda category, value=None: calls.append((category, value)))

    app_module.use_host_locale()

    assert calls == [(locale.LC_TIME, "")]


def test_use_host_locale_keeps_running_on_unknown_locale(monkeypatch, caplog):
    def unsupported(category, value=None):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(app_module.locale, "setlocale", unsupported)

    app_module.use_host_locale()

    assert "Keeping C locale" in caplog.text


def test_main_applies_host_locale_before_serving(monkeypatch, tmp_path, capsys):
    events = []
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("SHOW_QR", "off")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setattr(app_module, "use_host_locale", lambda: events.append("locale"))
    monkeypatch.setattr(app_module, "lan_url", lambda port: f"http://192.168.1.20:{port}")
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: events.append(("run", kwargs)))

    app_module.main()

    assert events == ["locale", ("run", {"host": "0.0.0.0", "port": 3001, "threaded": True})]
    assert "http://192.168.1.20:3001" in capsys.readouterr().out

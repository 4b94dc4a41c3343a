import pytest

from src.app import server
from src.app.config import Settings


def test_resolve_port():
    assert server.resolve_port(None) == 8000
    assert server.resolve_port("9100") == 9100
    assert server.resolve_port("not-a-port") == 8000


def test_main_starts_uvicorn_with_port(monkeypatch: pytest.MonkeyPatch):
    calls = {}
    monkeypatch.setenv("PORT", "9100")
    monkeypatch.setattr(server.uvicorn, "run", lambda target, **kwargs: calls.update(target=target, **kwargs))

    server.main()

    assert calls["target"] == "src.app.main:app"
    assert calls["port"] == 9100


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("http://a.test, http://b.test", ("http://a.test", "http://b.test")),
        ('["http://a.test"]', ("http://a.test",)),
        ("http://a.test", ("http://a.test",)),
        ("", ()),
    ],
)
def test_allowed_origins_from_environment(monkeypatch: pytest.MonkeyPatch, raw, expected):
    monkeypatch.setenv("TRIPQUOTE_FRONTEND_ALLOWED_ORIGINS", raw)

    assert Settings().frontend_allowed_origins == expected

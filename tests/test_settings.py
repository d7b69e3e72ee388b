import pytest
from pydantic import ValidationError

from blocklist.app.core.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("LOG_LEVEL", "LOG_FORMAT", "SOURCE_ENCODING", "OUTPUT_ENCODING"):
        monkeypatch.delenv(f"BLOCKLIST_{name}", raising=False)

    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.log_format == "text"
    assert settings.source_encoding == "utf-8"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", "DEBUG"), (" Info ", "INFO"), ("ERROR", "ERROR")],
)
def test_log_level_normalized(monkeypatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("BLOCKLIST_LOG_LEVEL", raw)

    settings = Settings(_env_file=None)
    assert settings.log_level == expected


def test_log_format_from_env(monkeypatch) -> None:
    monkeypatch.setenv("BLOCKLIST_LOG_FORMAT", "JSON")

    assert Settings(_env_file=None).log_format == "json"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("BLOCKLIST_LOG_LEVEL", "loud"),
        ("BLOCKLIST_LOG_FORMAT", "xml"),
        ("BLOCKLIST_LOG_FORMAT", "structured"),
        ("BLOCKLIST_SOURCE_ENCODING", "no-such-codec"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_source_encoding_used(monkeypatch, tmp_path) -> None:
    from blocklist.app.core import config
    from blocklist.app.services.compiler import syntax_check

    source = tmp_path / "list.json"
    source.write_bytes(
        '[{"type": "domain", "match": "literal", "domain": "bücher.de"}]'.encode("latin-1")
    )
    monkeypatch.setattr(config.settings, "source_encoding", "latin-1")

    assert syntax_check(source)[0].pattern == "bücher.de"

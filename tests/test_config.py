# tests/test_config.py

from pathlib import Path

from server.config import DEFAULT_SECRET, ROOT_DIR, Settings


def test_defaults(monkeypatch):
    for name in ("JWT_SECRET_KEY", "JWT_EXPIRE_MINUTES", "DATA_DIR", "BACKUP_SCRIPT", "BACKUP_KEEP", "BACKUP_TIMEOUT", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.secret_key == DEFAULT_SECRET
    assert settings.token_expire_minutes == 480
    assert settings.users_file == Path("data") / "users.json"
    assert settings.backup_script == ROOT_DIR / "scripts" / "backup_data.py"
    assert settings.backup_keep == 7
    assert settings.backup_timeout == 120
    assert settings.port == 3000


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
    monkeypatch.setenv("JWT_EXPIRE_MINUTES", "60")
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BACKUP_KEEP", "2")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings.from_env()

    assert settings.secret_key == "s3cret"
    assert settings.token_expire_minutes == 60
    assert settings.users_file == tmp_path / "users.json"
    assert settings.backup_keep == 2
    assert settings.port == 8080

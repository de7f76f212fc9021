import pytest

from iam_gateway.config import KNOWN_SERVICES, settings


@pytest.fixture()
def secrets_dir(tmp_path):
    return tmp_path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, secrets_dir):
    for var in (
        "DESCOPE_PROJECT_ID",
        "DESCOPE_MANAGEMENT_KEY",
        "DESCOPE_BASE_URL",
        "IAM_GATEWAY_SERVICES",
        "LOG_LEVEL",
        "TRUSTED_PROXY_COUNT",
        "MAX_CONTENT_LENGTH",
    ):
        monkeypatch.delenv(var, raising=False)
    # Point the /run/secrets lookup at an empty temp directory
    monkeypatch.setattr(settings, "Path", lambda _root: secrets_dir)


def _set_credentials(monkeypatch):
    monkeypatch.setenv("DESCOPE_PROJECT_ID", "P2test")
    monkeypatch.setenv("DESCOPE_MANAGEMENT_KEY", "K2secret")


def test_load_settings_defaults(monkeypatch):
    _set_credentials(monkeypatch)
    cfg = settings.load_settings()
    assert cfg.descope_project_id == "P2test"
    assert cfg.descope_management_key == "K2secret"
    assert cfg.descope_base_url == "https://api.descope.com"
    assert cfg.services == list(KNOWN_SERVICES)
    assert cfg.log_level == "INFO"
    assert cfg.trusted_proxy_count == 0
    assert cfg.max_content_length == 65536


def test_management_key_not_in_repr(monkeypatch):
    _set_credentials(monkeypatch)
    assert "K2secret" not in repr(settings.load_settings())


@pytest.mark.parametrize("missing", ["DESCOPE_PROJECT_ID", "DESCOPE_MANAGEMENT_KEY"])
def test_missing_credentials_raise(monkeypatch, missing):
    _set_credentials(monkeypatch)
    monkeypatch.delenv(missing)
    with pytest.raises(RuntimeError, match=missing):
        settings.load_settings()


def test_services_subset(monkeypatch):
    _set_credentials(monkeypatch)
    monkeypatch.setenv("IAM_GATEWAY_SERVICES", "Relations, members,relations")
    assert settings.load_settings().services == ["relations", "members"]


def test_unknown_service_rejected(monkeypatch):
    _set_credentials(monkeypatch)
    monkeypatch.setenv("IAM_GATEWAY_SERVICES", "members,billing")
    with pytest.raises(ValueError, match="billing"):
        settings.load_settings()


def test_base_url_trailing_slash_stripped(monkeypatch):
    _set_credentials(monkeypatch)
    monkeypatch.setenv("DESCOPE_BASE_URL", "https://api.euc1.descope.com/")
    assert settings.load_settings().descope_base_url == "https://api.euc1.descope.com"


def test_non_integer_proxy_count_rejected(monkeypatch):
    _set_credentials(monkeypatch)
    monkeypatch.setenv("TRUSTED_PROXY_COUNT", "two")
    with pytest.raises(RuntimeError, match="TRUSTED_PROXY_COUNT"):
        settings.load_settings()


def test_negative_proxy_count_rejected(monkeypatch):
    _set_credentials(monkeypatch)
    monkeypatch.setenv("TRUSTED_PROXY_COUNT", "-1")
    with pytest.raises(RuntimeError):
        settings.load_settings()


def test_secret_file_takes_priority(monkeypatch, secrets_dir):
    (secrets_dir / "descope_management_key").write_text("K2fromfile\n")
    monkeypatch.setenv("DESCOPE_PROJECT_ID", "P2test")
    monkeypatch.setenv("DESCOPE_MANAGEMENT_KEY", "K2fromenv")
    assert settings.load_settings().descope_management_key == "K2fromfile"


def test_empty_secret_file_falls_back_to_env(monkeypatch, secrets_dir):
    (secrets_dir / "descope_project_id").write_text("  \n")
    monkeypatch.setenv("DESCOPE_PROJECT_ID", "P2env")
    assert settings._load_secret_from_file("descope_project_id", "DESCOPE_PROJECT_ID") == "P2env"


@pytest.mark.parametrize("value", ["0", "-1"])
def test_non_positive_max_content_length_rejected(monkeypatch, value):
    _set_credentials(monkeypatch)
    monkeypatch.setenv("MAX_CONTENT_LENGTH", value)
    with pytest.raises(RuntimeError, match="MAX_CONTENT_LENGTH"):
        settings.load_settings()


def test_max_content_length_from_env(monkeypatch):
    _set_credentials(monkeypatch)
    monkeypatch.setenv("MAX_CONTENT_LENGTH", "1024")
    assert settings.load_settings().max_content_length == 1024

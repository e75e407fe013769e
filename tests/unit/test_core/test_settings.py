"""Unit tests for settings and configuration."""

from pathlib import Path

from pydantic import ValidationError
import pytest

from object_gateway.core.settings import (
    AppSettings,
    LoggingSettings,
    StorageBackendType,
    StorageSettings,
    get_app_settings,
    get_storage_settings,
)

_STORAGE_ENV = (
    "STORAGE_BACKEND",
    "STORAGE_BUCKET",
    "STORAGE_REGION",
    "STORAGE_ACCESS_KEY",
    "STORAGE_SECRET_KEY",
    "STORAGE_ENDPOINT",
    "STORAGE_STAGING_DIR",
    "AWS_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_S3_BUCKET_NAME",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Strip storage and port variables inherited from the host."""
    for name in (*_STORAGE_ENV, "APP_PORT", "PORT", "APP_HOST"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
class TestAppSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch):
        settings = AppSettings(_env_file=None)

        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.service_name == "object-gateway"
        assert settings.docs_enabled

    def test_port_from_bare_port_variable(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("PORT", "8080")

        assert AppSettings(_env_file=None).port == 8080

    def test_prefixed_port_wins(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("APP_PORT", "9000")
        clean_env.setenv("PORT", "8080")

        assert AppSettings(_env_file=None).port == 9000

    def test_debug_rejected_in_production(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, environment="production", debug=True)

    def test_settings_are_frozen(self):
        settings = AppSettings(_env_file=None)

        with pytest.raises(ValidationError):
            settings.port = 1234

    def test_loader_is_cached(self):
        assert get_app_settings() is get_app_settings()


@pytest.mark.unit
class TestStorageSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch):
        settings = StorageSettings(_env_file=None)

        assert settings.backend is StorageBackendType.S3
        assert settings.bucket == "uploads"
        assert settings.region == "us-east-1"
        assert settings.staging_dir == Path("uploads")
        assert settings.access_key is None

    def test_aws_variable_names(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("AWS_REGION", "eu-west-1")
        clean_env.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLE")
        clean_env.setenv("AWS_SECRET_ACCESS_KEY", "secret")
        clean_env.setenv("AWS_S3_BUCKET_NAME", "my-bucket")

        settings = StorageSettings(_env_file=None)

        assert settings.region == "eu-west-1"
        assert settings.bucket == "my-bucket"
        assert settings.access_key.get_secret_value() == "AKIAEXAMPLE"
        assert settings.secret_key.get_secret_value() == "secret"

    def test_storage_prefix_wins_over_aws_names(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("STORAGE_BUCKET", "primary")
        clean_env.setenv("AWS_S3_BUCKET_NAME", "fallback")

        assert StorageSettings(_env_file=None).bucket == "primary"

    def test_credentials_required_together(self, clean_env: pytest.MonkeyPatch):
        with pytest.raises(ValidationError, match="access_key and secret_key"):
            StorageSettings(_env_file=None, access_key="only-access")

    def test_invalid_retry_mode(self, clean_env: pytest.MonkeyPatch):
        with pytest.raises(ValidationError, match="retry_mode"):
            StorageSettings(_env_file=None, retry_mode="aggressive")

    def test_boto3_config_without_credentials(self, clean_env: pytest.MonkeyPatch):
        config = StorageSettings(_env_file=None).get_boto3_config()

        assert config == {"region_name": "us-east-1", "use_ssl": True, "verify": True}

    def test_boto3_config_for_minio(self, clean_env: pytest.MonkeyPatch):
        settings = StorageSettings(
            _env_file=None,
            endpoint="http://localhost:9000",
            access_key="minioadmin",
            secret_key="minioadmin",
            use_ssl=False,
        )

        config = settings.get_boto3_config()

        assert config["endpoint_url"] == "http://localhost:9000"
        assert config["aws_access_key_id"] == "minioadmin"
        assert config["aws_secret_access_key"] == "minioadmin"
        assert config["use_ssl"] is False

    def test_secrets_masked_in_dump(self, clean_env: pytest.MonkeyPatch):
        settings = StorageSettings(_env_file=None, access_key="key", secret_key="secret")

        dumped = settings.model_dump(mode="json")

        assert "secret" not in str(dumped.values())
        assert dumped["secret_key"] == "**********"

    def test_memory_backend_from_env(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("STORAGE_BACKEND", "memory")

        assert get_storage_settings().backend is StorageBackendType.MEMORY


@pytest.mark.unit
class TestLoggingSettings:
    def test_json_toggle(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_JSON", "false")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = LoggingSettings(_env_file=None)

        assert settings.to_logging_kwargs() == {
            "log_level": "DEBUG",
            "json_logs": False,
            "service_name": "object-gateway",
            "include_uvicorn": True,
        }

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(_env_file=None, level="VERBOSE")

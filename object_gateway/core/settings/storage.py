"""S3-compatible object storage configuration settings.

Environment variables use STORAGE_ prefix.
Example: STORAGE_ENDPOINT="http://localhost:9000"
         STORAGE_BUCKET="uploads"

The conventional AWS variable names (AWS_REGION, AWS_ACCESS_KEY_ID,
AWS_SECRET_ACCESS_KEY, AWS_S3_BUCKET_NAME) are accepted as well.

Supports:
- AWS S3 (default, no endpoint needed)
- MinIO (set endpoint to MinIO server URL)
- LocalStack (set endpoint to LocalStack URL)
- An in-process memory backend for local development
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackendType(str, Enum):
    """Supported storage backends."""

    S3 = "s3"
    MEMORY = "memory"


class StorageSettings(BaseSettings):
    """S3-compatible object storage settings.

    Read once at process start; instances are frozen.
    """

    # ──────────────────────────────────────────────────────────────
    # Backend selection
    # ──────────────────────────────────────────────────────────────

    backend: StorageBackendType = Field(
        default=StorageBackendType.S3,
        description="Storage backend implementation (s3 or memory)",
    )

    # ──────────────────────────────────────────────────────────────
    # S3 Connection Configuration
    # ──────────────────────────────────────────────────────────────

    endpoint: str | None = Field(
        default=None,
        description="S3-compatible endpoint URL (for MinIO/LocalStack). None for AWS S3.",
    )

    bucket: str = Field(
        default="uploads",
        min_length=3,
        max_length=63,
        validation_alias=AliasChoices("STORAGE_BUCKET", "AWS_S3_BUCKET_NAME"),
        description="Bucket holding every object served by the gateway",
    )

    region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("STORAGE_REGION", "AWS_REGION"),
        description="AWS region (used for AWS S3 and request signing)",
    )

    access_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("STORAGE_ACCESS_KEY", "AWS_ACCESS_KEY_ID"),
        description="S3 access key ID",
    )

    secret_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("STORAGE_SECRET_KEY", "AWS_SECRET_ACCESS_KEY"),
        description="S3 secret access key",
    )

    use_ssl: bool = Field(
        default=True,
        description="Use SSL/TLS for S3 connections (set False for local MinIO without TLS)",
    )

    verify_ssl: bool = Field(
        default=True,
        description="Verify SSL certificates (set False for self-signed certs in local MinIO)",
    )

    max_retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Retry attempts performed by the botocore client itself",
    )

    retry_mode: str = Field(
        default="standard",
        description="botocore retry mode: standard, adaptive, or legacy",
    )

    timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Connect and read timeout in seconds",
    )

    max_pool_connections: int = Field(
        default=10,
        ge=1,
        le=200,
        description="Maximum number of connections in the connection pool",
    )

    list_page_size: int = Field(
        default=1000,
        ge=1,
        le=1000,
        description="Objects requested per list page",
    )

    # ──────────────────────────────────────────────────────────────
    # Local staging
    # ──────────────────────────────────────────────────────────────

    staging_dir: Path = Field(
        default=Path("uploads"),
        description="Local directory holding uploads while they are forwarded",
    )

    # ──────────────────────────────────────────────────────────────
    # Service Lifecycle Configuration
    # ──────────────────────────────────────────────────────────────

    startup_require_storage: bool = Field(
        default=False,
        description="Fail application startup if the backend cannot start (False = degraded mode)",
    )

    # ──────────────────────────────────────────────────────────────
    # Validators
    # ──────────────────────────────────────────────────────────────

    @model_validator(mode="after")
    def _validate_credential_consistency(self) -> StorageSettings:
        """Require access_key and secret_key together or neither.

        Neither means the default AWS credential chain (IAM role, profile).
        """
        if (self.access_key is None) != (self.secret_key is None):
            msg = (
                "Both access_key and secret_key must be provided together when using "
                "static credentials. Provide both or neither (for IAM role authentication)."
            )
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def _validate_retry_mode(self) -> StorageSettings:
        allowed_modes = {"standard", "adaptive", "legacy"}
        if self.retry_mode not in allowed_modes:
            msg = f"retry_mode must be one of {allowed_modes}, got {self.retry_mode}"
            raise ValueError(msg)
        return self

    # ──────────────────────────────────────────────────────────────
    # Client configuration
    # ──────────────────────────────────────────────────────────────

    def get_boto3_config(self) -> dict[str, Any]:
        """Get keyword arguments for creating an aioboto3 S3 client.

        Credentials are only included when both are set; otherwise boto3
        falls back to its default credential chain.
        """
        config: dict[str, Any] = {
            "region_name": self.region,
            "use_ssl": self.use_ssl,
            "verify": self.verify_ssl,
        }

        if self.access_key is not None and self.secret_key is not None:
            config["aws_access_key_id"] = self.access_key.get_secret_value()
            config["aws_secret_access_key"] = self.secret_key.get_secret_value()

        if self.endpoint:
            config["endpoint_url"] = self.endpoint

        return config

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        env_ignore_empty=True,
    )

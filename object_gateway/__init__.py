"""Object Gateway Service: an HTTP façade over S3-compatible object storage."""

__version__ = "0.1.0"

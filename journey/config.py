"""Application-wide configuration and settings.

Uses ``pydantic-settings`` so values can be overridden via environment
variables prefixed with ``JOURNEY_``.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the Journey prefill engine.

    Attributes:
        app_name: Display name of the application.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Emit JSON log lines instead of the console renderer.
        api_base_url: Base URL of the blueprint API serving graph snapshots.
        tenant_id: Tenant whose blueprint is loaded at startup.
        blueprint_id: Blueprint whose graph is loaded at startup.
        request_timeout_seconds: Timeout for blueprint API requests.
        graph_file: Optional JSON snapshot to load instead of calling the API.
        host: Interface the API server binds to.
        port: Port the API server listens on (``PORT`` overrides it).
        reload: Enable uvicorn auto-reload for development.
        cors_origins: Origins allowed to call the HTTP surface.
    """

    app_name: str = "Journey"
    log_level: str = "INFO"
    log_json: bool = False

    # Blueprint API
    api_base_url: str = "http://localhost:3000"
    tenant_id: str = "1"
    blueprint_id: str = "bp_01jk766tckfwx84xjcxazggzyc"
    request_timeout_seconds: float = 10.0

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # Local snapshot, takes precedence over the API when set
    graph_file: str = ""

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    model_config = {"env_prefix": "JOURNEY_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()

#!/usr/bin/env python3
"""
admindash Server Configuration Management

Sources, later ones win:
1. ServerConfig defaults
2. Optional YAML file (-c/--config)
3. Process environment (a .env file in the working directory is loaded first)
     HOST, PORT, DATABASE_URL, LOG_LEVEL, DASHBOARD_API_URL
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger("admindash.server")

# env var -> config field
ENV_OVERRIDES = {
    "HOST": "host",
    "PORT": "port",
    "DATABASE_URL": "database_url",
    "LOG_LEVEL": "log_level",
    "DASHBOARD_API_URL": "api_url",
}


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    # Store connection string (playhouse.db_url syntax)
    database_url: str = "sqlite:///admindash.db"
    cors_origins: List[str] = ["*"]
    # Dashboard client
    api_url: Optional[str] = None   # defaults to this server's /api/data
    max_views: int = 256

    def resolved_api_url(self) -> str:
        """API base URL the dashboard client talks to."""
        if self.api_url:
            return self.api_url.rstrip("/")
        host = "127.0.0.1" if self.host in ("0.0.0.0", "::") else self.host
        return f"http://{host}:{self.port}/api/data"


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config_from(path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> ServerConfig:
    """Load server configuration from an optional YAML file, then the environment."""
    data: Dict[str, Any] = {}
    if path:
        config_file = Path(path)
        if config_file.exists():
            logger.info(f"Loading configuration from: {config_file}")
            data.update(_read_yaml(config_file))
        else:
            logger.info(f"Config file not found: {config_file}, using defaults")

    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    for env_name, field in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            data[field] = value

    return ServerConfig(**data)

"""
Configuration module: loads service settings from YAML with environment overrides.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional

DEFAULT_CONFIG_PATH = "config.yaml"


class Config:
    """Service configuration backed by a YAML file"""

    def __init__(self, config_path: Optional[str] = None):
        explicit = config_path or os.getenv("POSTS_CONFIG")
        self.config_path = Path(explicit or DEFAULT_CONFIG_PATH)
        self.required = explicit is not None
        self.config: Dict[str, Any] = {}
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from the YAML file"""
        if not self.config_path.exists():
            if self.required:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
            # Built-in defaults apply
            self.config = {}
            return

        with open(self.config_path, 'r', encoding='utf-8') as f:
            self.config = yaml.safe_load(f) or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by key (nested keys are separated by dots)"""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

        return value if value is not None else default

    # Service
    @property
    def service_name(self) -> str:
        return self.get('service.name', 'posts')

    # Web interface
    @property
    def web_host(self) -> str:
        return self.get('web.host', '0.0.0.0')

    @property
    def web_port(self) -> int:
        return int(self.get('web.port', 7006))

    @property
    def cors_origins(self) -> List[str]:
        return self.get('web.cors_origins', ['http://localhost:3000'])

    # Auth
    @property
    def jwt_secret(self) -> str:
        return os.getenv("JWT_SECRET") or self.get('auth.secret', 'dev-secret')

    @property
    def jwt_algorithm(self) -> str:
        return os.getenv("JWT_ALGORITHM") or self.get('auth.algorithm', 'HS256')

    @property
    def auth_header(self) -> str:
        """Name of the header carrying the bearer credential"""
        return (os.getenv("AUTH_HEADER") or self.get('auth.header', 'authorization')).lower()

    @property
    def require_expiry(self) -> bool:
        return bool(self.get('auth.require_expiry', False))

    @property
    def token_expire_minutes(self) -> int:
        return int(self.get('auth.token_expire_minutes', 60))

    # Access policy
    @property
    def policy(self) -> Dict[str, str]:
        return dict(self.get('policy', {}))

    # Logging
    @property
    def log_level(self) -> str:
        return self.get('logging.level', 'INFO')

    # Tracing
    @property
    def tracing_enabled(self) -> bool:
        return bool(self.get('tracing.enabled', False))

    @property
    def tracing_sample_ratio(self) -> float:
        return float(self.get('tracing.sample_ratio', 0.1))


# Global configuration instance
config = Config()

from typing import List, Optional, Union
from pathlib import Path
import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field, ValidationError
from .exceptions import ConfigurationError

class RedisServerConfig(BaseModel):
    name: str
    url: str = "redis://localhost:6379/0"

    # Bytes. None or 0 disables the memory check.
    # LRU cache: the server's `maxmemory`. Pub/sub: observed runtime usage.
    # Leave unset for autoscaled deployments.
    memory_threshold: Optional[Union[int, float]] = Field(default=None, ge=0)

    # Client Options
    socket_timeout: Optional[float] = None

class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="REDISSTATUS_")

    servers: List[RedisServerConfig] = []

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                raw_config = yaml.safe_load(f) or {}
            return cls(**raw_config)
        except (ValidationError, yaml.YAMLError, TypeError) as e:
            raise ConfigurationError(f"Invalid configuration format: {e}")

    def get_server_config(self, name: str) -> RedisServerConfig:
        for server in self.servers:
            if server.name == name:
                return server
        raise ConfigurationError(f"Server '{name}' not found in config")

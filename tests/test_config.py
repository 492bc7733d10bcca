import pytest
from redis.asyncio import Redis
from redisstatus.config import AppConfig, RedisServerConfig
from redisstatus.connectors.factory import get_client
from redisstatus.exceptions import ConfigurationError, ConnectionError

CONFIG_YAML = """
servers:
  - name: Cache
    url: redis://cache.internal:6379/0
    memory_threshold: 1000000
  - name: PubSub
    url: redis://pubsub.internal:6379/1
    socket_timeout: 2.5
"""

def test_from_yaml(tmp_path):
    path = tmp_path / "redisstatus.yaml"
    path.write_text(CONFIG_YAML)

    config = AppConfig.from_yaml(path)

    assert [s.name for s in config.servers] == ["Cache", "PubSub"]
    cache = config.get_server_config("Cache")
    assert cache.memory_threshold == 1000000
    assert cache.socket_timeout is None
    assert config.get_server_config("PubSub").memory_threshold is None

def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        AppConfig.from_yaml(tmp_path / "missing.yaml")

def test_invalid_format(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("servers:\n  - url: redis://localhost\n")  # name is required

    with pytest.raises(ConfigurationError, match="Invalid configuration format"):
        AppConfig.from_yaml(path)

def test_negative_threshold_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("servers:\n  - name: Cache\n    memory_threshold: -1\n")

    with pytest.raises(ConfigurationError):
        AppConfig.from_yaml(path)

def test_unknown_server(tmp_path):
    path = tmp_path / "redisstatus.yaml"
    path.write_text(CONFIG_YAML)

    with pytest.raises(ConfigurationError, match="'Queue' not found"):
        AppConfig.from_yaml(path).get_server_config("Queue")

def test_get_client_from_url():
    client = get_client("redis://localhost:6379/2")

    assert isinstance(client, Redis)
    assert client.connection_pool.connection_kwargs["db"] == 2

def test_get_client_from_config():
    config = RedisServerConfig(name="Cache", url="redis://cache.internal:6380/0", socket_timeout=1.5)
    client = get_client(config)

    kwargs = client.connection_pool.connection_kwargs
    assert kwargs["host"] == "cache.internal"
    assert kwargs["port"] == 6380
    assert kwargs["socket_timeout"] == 1.5

def test_get_client_rejects_bad_scheme():
    with pytest.raises(ConnectionError):
        get_client("http://localhost:6379")

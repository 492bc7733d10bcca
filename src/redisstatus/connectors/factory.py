from typing import Union
from redis.asyncio import Redis
from ..config import RedisServerConfig
from ..exceptions import ConnectionError

def get_client(config: Union[str, RedisServerConfig]) -> Redis:
    """
    Factory function to create an asyncio Redis client.
    Accepts either a connection URL (str) or a RedisServerConfig object.
    The connection is opened lazily on the first command.
    """
    options = {}
    if isinstance(config, RedisServerConfig):
        url = config.url
        if config.socket_timeout is not None:
            options["socket_timeout"] = config.socket_timeout
            options["socket_connect_timeout"] = config.socket_timeout
    else:
        url = config

    try:
        return Redis.from_url(url, **options)
    except ValueError as e:
        raise ConnectionError(f"Failed to create client for {url}: {e}")

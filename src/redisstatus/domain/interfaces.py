from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

@runtime_checkable
class RedisClient(Protocol):
    """
    The subset of `redis.asyncio.Redis` a status check relies on.
    The handle is expected to be connected (or lazily connectable) and is
    closed by the checker once the check completes.
    """
    async def ping(self, **kwargs: Any) -> Union[bool, str, bytes]:
        ...

    async def info(self, section: Optional[str] = None, *args: str, **kwargs: Any) -> Union[Mapping[str, Any], str]:
        ...

    async def aclose(self, close_connection_pool: Optional[bool] = None) -> None:
        ...

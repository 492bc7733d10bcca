from unittest.mock import AsyncMock, MagicMock
import pytest

MEMORY_INFO = "# Memory\r\nused_memory:1086352\r\nused_memory_human:1.04M\r\nused_memory_rss:5320704\r\n"

@pytest.fixture
def make_client():
    """
    Builds a fake asyncio Redis client.
    Pass an exception instance as `pong` or `info` to make that call raise it.
    """
    def _make(pong=True, info=MEMORY_INFO, close_error=None):
        client = MagicMock()
        client.ping = AsyncMock(side_effect=pong if isinstance(pong, Exception) else None,
                                return_value=pong)
        client.info = AsyncMock(side_effect=info if isinstance(info, Exception) else None,
                                return_value=info)
        client.aclose = AsyncMock(side_effect=close_error)
        return client
    return _make

import logging
import time
from typing import Any, Optional, Union
from ..config import RedisServerConfig
from ..domain.interfaces import RedisClient
from ..domain.models import HealthStatus, StatusReport
from ..exceptions import InfoParseError
from .parser import parse_used_memory

logger = logging.getLogger(__name__)

PONG = "PONG"

class StatusChecker:
    """
    Checks the status of one Redis server.

    The server is healthy if it answers PING and, when a memory threshold is
    set, reports `used_memory` no greater than the threshold.

    The client is closed at the end of every check, so a checker cannot be
    reused unless the caller hands it a reconnected client.
    """
    def __init__(self, client: RedisClient, name: str, memory_threshold: Optional[Union[int, float]] = None):
        self.client = client
        self.name = name
        self.memory_threshold = memory_threshold

    @classmethod
    def from_config(cls, client: RedisClient, config: RedisServerConfig) -> "StatusChecker":
        return cls(client, config.name, config.memory_threshold)

    async def check_status(self) -> Optional[str]:
        """
        Returns None if the server is healthy, or a sentence describing why it is not.
        Never raises for probe failures.
        """
        report = await self.check()
        return report.reason

    async def check(self) -> StatusReport:
        try:
            report = await self._probe()
        finally:
            await self._close()

        if report.healthy:
            logger.debug("%s is healthy", self.name)
        else:
            logger.warning(report.reason)
        return report

    async def _probe(self) -> StatusReport:
        start_time = time.perf_counter()
        try:
            pong = await self.client.ping()
        except Exception as e:
            logger.debug("PING to %s failed: %s", self.name, e)
            return self._unresponsive()
        latency = round((time.perf_counter() - start_time) * 1000, 2)

        if not _is_pong(pong):
            logger.debug("Unexpected PING reply from %s: %r", self.name, pong)
            return self._unresponsive(latency_ms=latency)

        if not self.memory_threshold:
            return self._report(HealthStatus.HEALTHY, latency_ms=latency)

        try:
            info = await self.client.info("memory")
            used_memory = parse_used_memory(info)
        except InfoParseError as e:
            logger.debug("Unreadable INFO memory reply from %s: %s", self.name, e)
            return self._unresponsive(latency_ms=latency)
        except Exception as e:
            logger.debug("INFO memory on %s failed: %s", self.name, e)
            return self._unresponsive(latency_ms=latency)

        if used_memory > self.memory_threshold:
            return self._report(
                HealthStatus.HIGH_MEMORY,
                reason=f"{self.name} Redis instance is using abnormally high memory.",
                used_memory=used_memory,
                latency_ms=latency,
            )
        return self._report(HealthStatus.HEALTHY, used_memory=used_memory, latency_ms=latency)

    async def _close(self) -> None:
        try:
            await self.client.aclose()
        except Exception as e:
            logger.warning("Failed to close connection to %s: %s", self.name, e)

    def _unresponsive(self, **fields: Any) -> StatusReport:
        return self._report(
            HealthStatus.UNRESPONSIVE,
            reason=f"{self.name} Redis instance is not responsive.",
            **fields,
        )

    def _report(self, status: HealthStatus, **fields: Any) -> StatusReport:
        return StatusReport(
            name=self.name,
            status=status,
            memory_threshold=self.memory_threshold,
            **fields,
        )

def _is_pong(reply: Any) -> bool:
    # redis-py maps the PONG status reply to True by default
    if reply is True:
        return True
    if isinstance(reply, bytes):
        reply = reply.decode("utf-8", errors="replace")
    return reply == PONG

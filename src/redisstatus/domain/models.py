from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel

class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNRESPONSIVE = "unresponsive"
    HIGH_MEMORY = "high_memory"

class StatusReport(BaseModel):
    """
    Outcome of a single status check.
    `reason` is None when the server is healthy, otherwise a sentence
    naming the server and the failure category.
    """
    name: str
    status: HealthStatus
    reason: Optional[str] = None
    used_memory: Optional[int] = None
    memory_threshold: Optional[Union[int, float]] = None
    latency_ms: Optional[float] = None

    @property
    def healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

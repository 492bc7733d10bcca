from .domain.models import HealthStatus, StatusReport
from .inspector import StatusChecker

__all__ = ["HealthStatus", "StatusChecker", "StatusReport"]

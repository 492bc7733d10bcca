from .checker import StatusChecker
from .parser import parse_used_memory

__all__ = ["StatusChecker", "parse_used_memory"]

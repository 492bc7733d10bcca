from typing import Any, Mapping, Union
from ..exceptions import InfoParseError

USED_MEMORY_FIELD = "used_memory"

def parse_used_memory(info: Union[Mapping[str, Any], str, bytes]) -> int:
    """
    Extracts `used_memory` (bytes) from an INFO memory payload.

    Accepts the raw text block, e.g. '# Memory\\r\\nused_memory:1086352\\r\\n...',
    or the mapping redis-py builds from it. The field is looked up by key,
    which for a well-formed payload is the second line.
    """
    if isinstance(info, Mapping):
        if USED_MEMORY_FIELD not in info:
            raise InfoParseError(f"'{USED_MEMORY_FIELD}' missing from INFO memory reply")
        return _to_int(info[USED_MEMORY_FIELD])

    if isinstance(info, bytes):
        info = info.decode("utf-8", errors="replace")
    if not isinstance(info, str):
        raise InfoParseError(f"Unexpected INFO reply type: {type(info).__name__}")

    for line in info.split("\r\n"):
        key, sep, value = line.partition(":")
        if sep and key.strip() == USED_MEMORY_FIELD:
            return _to_int(value)

    raise InfoParseError(f"'{USED_MEMORY_FIELD}' missing from INFO memory reply")

def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise InfoParseError(f"Invalid {USED_MEMORY_FIELD} value: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        raise InfoParseError(f"Invalid {USED_MEMORY_FIELD} value: {value!r}")

class RedisStatusException(Exception):
    """Base Exception Class"""
    pass

class ConnectionError(RedisStatusException):
    """Client Construction Failure"""
    pass

class ConfigurationError(RedisStatusException):
    """Configuration Error"""
    pass

class InfoParseError(RedisStatusException):
    """Malformed INFO payload"""
    pass

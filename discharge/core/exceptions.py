"""Exception types raised by the discharge report parser."""


class DischargeError(Exception):
    """Base class for discharge report errors."""


class InputNotFoundError(DischargeError, FileNotFoundError):
    """Raised when the input path does not reference a readable file."""


class ConfigError(DischargeError, ValueError):
    """Raised when a configuration value cannot be interpreted."""

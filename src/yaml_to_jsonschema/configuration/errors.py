"""Configuration errors."""


class ConfigurationError(Exception):
    """Raised when the generator configuration is invalid."""

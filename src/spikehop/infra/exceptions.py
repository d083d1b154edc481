class ConfigError(Exception):
    """Raised when a game config file cannot be read or fails validation."""

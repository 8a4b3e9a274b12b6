"""Exception types for the complexity scorer.

The scoring core itself never raises; these cover the configuration and
tool layers around it.
"""


class ComplexityScorerError(Exception):
    """Base exception for all complexity scorer errors."""


class ConfigurationError(ComplexityScorerError):
    """Raised when a configuration file cannot be loaded or validated."""

    def __init__(self, config_path: str, error: str) -> None:
        self.config_path = config_path
        self.error = error
        super().__init__(f"Invalid configuration file '{config_path}': {error}")

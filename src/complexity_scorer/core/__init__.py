"""Core infrastructure for the complexity scorer."""

from complexity_scorer.core.config import (
    get_configured_overrides,
    get_scorer_config,
    load_config_file,
    parse_args_and_get_config,
    set_scorer_config,
)
from complexity_scorer.core.exceptions import (
    ComplexityScorerError,
    ConfigurationError,
)
from complexity_scorer.core.logging import (
    configure_logging,
    get_logger,
)
from complexity_scorer.core.sentry import (
    init_sentry,
)

__all__ = [
    # Exceptions
    "ComplexityScorerError",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "get_configured_overrides",
    "get_scorer_config",
    "load_config_file",
    "parse_args_and_get_config",
    "set_scorer_config",
    # Sentry
    "init_sentry",
]

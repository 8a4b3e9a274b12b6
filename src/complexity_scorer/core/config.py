"""Configuration management for the complexity scorer server."""

import argparse
import os
import sys
from typing import List, Optional, Union

import yaml
from pydantic import ValidationError

from complexity_scorer.constants import CONFIG_ENV_VAR, LoggingDefaults
from complexity_scorer.core.exceptions import ConfigurationError
from complexity_scorer.core.logging import configure_logging, get_logger
from complexity_scorer.models.complexity import LanguageTag, PatternOverrides
from complexity_scorer.models.config import ScorerConfig

# Set by parse_args_and_get_config
CONFIG_PATH: Optional[str] = None

# Loaded configuration; None means no config file was given
_scorer_config: Optional[ScorerConfig] = None


def load_config_file(config_path: str) -> ScorerConfig:
    """Load and validate a scorer YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated ScorerConfig model

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if not os.path.exists(config_path):
        raise ConfigurationError(config_path, "File does not exist")

    if not os.path.isfile(config_path):
        raise ConfigurationError(config_path, "Path is not a file")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(config_path, f"YAML parsing failed: {e}") from e
    except OSError as e:
        raise ConfigurationError(config_path, f"Failed to read file: {e}") from e

    if config_data is None:
        raise ConfigurationError(config_path, "Config file is empty")

    if not isinstance(config_data, dict):
        raise ConfigurationError(config_path, "Config must be a YAML dictionary")

    try:
        return ScorerConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(config_path, f"Validation failed: {e}") from e


def set_scorer_config(config: Optional[ScorerConfig]) -> None:
    """Install (or clear with None) the process-wide scorer configuration."""
    global _scorer_config
    _scorer_config = config


def get_scorer_config() -> Optional[ScorerConfig]:
    return _scorer_config


def get_configured_overrides(language: Union[LanguageTag, str]) -> Optional[PatternOverrides]:
    """Return pattern overrides configured for a language, if any.

    Args:
        language: LanguageTag or language name

    Returns:
        PatternOverrides from the loaded config file, or None
    """
    if _scorer_config is None:
        return None
    # Imported here: the complexity feature package imports this module
    from complexity_scorer.features.complexity.patterns import resolve_language
    return _scorer_config.overrides_for(resolve_language(language))


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="complexity-scorer",
        description="Complexity scorer MCP server - heuristic code complexity scores via Model Context Protocol",
        epilog=f"""
environment variables:
  {CONFIG_ENV_VAR}  Path to YAML config file (overridden by --config flag)
  LOG_LEVEL                 Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)
  LOG_FILE                  Path to log file (logs to stderr by default)
  SENTRY_DSN                Enables Sentry error reporting when set
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to YAML config file declaring per-language pattern overrides",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Can also be set via LOG_LEVEL env var. Default: INFO",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        default=None,
        help="Path to log file (logs to stderr by default). Can also be set via LOG_FILE env var.",
    )
    return parser


def _configure_logging_from_args(args: argparse.Namespace) -> None:
    """Configure logging. Precedence: flags > env vars > defaults."""
    log_level = args.log_level or os.environ.get("LOG_LEVEL", LoggingDefaults.DEFAULT_LEVEL)
    log_file = args.log_file or os.environ.get("LOG_FILE")
    configure_logging(log_level=log_level, log_file=log_file)


def _resolve_config_path(args: argparse.Namespace) -> Optional[str]:
    """Precedence: --config flag > env var > None."""
    return args.config or os.environ.get(CONFIG_ENV_VAR) or None


def parse_args_and_get_config(argv: Optional[List[str]] = None) -> Optional[ScorerConfig]:
    """Parse command-line arguments, configure logging and load the config file.

    Exits the process with status 1 when the config file is invalid.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        The loaded ScorerConfig, or None when no config file was given
    """
    global CONFIG_PATH

    args = _create_argument_parser().parse_args(argv)
    _configure_logging_from_args(args)

    CONFIG_PATH = _resolve_config_path(args)
    if CONFIG_PATH is None:
        set_scorer_config(None)
        return None

    logger = get_logger("config")
    try:
        config = load_config_file(CONFIG_PATH)
    except ConfigurationError as e:
        logger.error("config_validation_failed", config_path=CONFIG_PATH, error=str(e))
        sys.exit(1)

    set_scorer_config(config)
    logger.info("config_loaded", config_path=CONFIG_PATH, languages=sorted(config.languages))
    return config

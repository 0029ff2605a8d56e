"""
Configuration for caption retrieval.
Defaults can be overridden via environment variables or a local .env file.
"""

import math
import os
from pathlib import Path
from typing import List, Optional, Tuple
from dataclasses import dataclass, field
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

DEFAULT_WATCH_URL_TEMPLATE = "https://youtube.com/watch?v={video_id}"


def _parse_optional_float_env(env_var: str) -> Optional[float]:
    """Parse an optional float environment variable; unset or invalid yields None."""
    value = os.getenv(env_var)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logging.warning(f"Invalid number in environment variable {env_var}, ignoring it")
        return None


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

@dataclass
class NetworkConfig:
    """HTTP settings for the watch page and timed-text requests."""
    watch_url_template: str = field(default_factory=lambda: os.getenv('CAPTIONS_WATCH_URL_TEMPLATE', DEFAULT_WATCH_URL_TEMPLATE))

    # None keeps the transport default (no timeout)
    http_timeout: Optional[float] = field(default_factory=lambda: _parse_optional_float_env('CAPTIONS_HTTP_TIMEOUT'))

    # Optional request headers; unset means requests' own defaults
    user_agent: Optional[str] = field(default_factory=lambda: os.getenv('CAPTIONS_USER_AGENT') or None)
    accept_language: Optional[str] = field(default_factory=lambda: os.getenv('CAPTIONS_ACCEPT_LANGUAGE') or None)

    def watch_url(self, video_id: str) -> str:
        """Build the watch page URL for a video ID."""
        return self.watch_url_template.format(video_id=video_id)

# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class Config:
    """Main configuration class that aggregates all configuration sections."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)

# Global configuration instance
config = Config()


def _check_watch_url_template(template) -> List[str]:
    """Check that a watch URL template formats with only a video ID."""
    if not isinstance(template, str) or "{video_id}" not in template:
        return ["CAPTIONS_WATCH_URL_TEMPLATE must contain '{video_id}'"]
    try:
        template.format(video_id="CLkkj3aka4g")
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        return [f"CAPTIONS_WATCH_URL_TEMPLATE cannot be formatted: {e!r}"]
    return []


def validate_config(cfg: Optional[Config] = None) -> Tuple[bool, List[str]]:
    """
    Validate configuration values.

    Args:
        cfg: Configuration to check, the global instance by default

    Returns:
        Tuple of (is_valid, problems)
    """
    cfg = cfg or config
    problems = []

    problems.extend(_check_watch_url_template(cfg.network.watch_url_template))

    timeout = cfg.network.http_timeout
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            problems.append(f"CAPTIONS_HTTP_TIMEOUT must be a number, got {timeout!r}")
        elif not math.isfinite(timeout) or timeout <= 0:
            problems.append(f"CAPTIONS_HTTP_TIMEOUT must be a positive number of seconds, got {timeout!r}")

    if cfg.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        problems.append(f"LOG_LEVEL has unknown value: {cfg.logging.level}")

    return len(problems) == 0, problems

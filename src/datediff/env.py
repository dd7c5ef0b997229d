import logging
import os
from enum import StrEnum


class EnvName(StrEnum):
  """Represents the names of the environment variables read by datediff."""

  LOG_LEVEL = "DATEDIFF_LOG_LEVEL"
  """The environment variable name for the log level, i.e. DEBUG or INFO."""
  JSON_LOGS = "DATEDIFF_JSON_LOGS"
  """The environment variable name for switching log output to JSON lines."""


DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


def get_log_level() -> str:
  """
  Retrieves the log level from environment variables.

  Returns:
    The uppercased log level name, or INFO if unset.

  Raises:
    EnvironmentError: If the DATEDIFF_LOG_LEVEL environment variable is not a known level.
  """
  level = os.getenv(EnvName.LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
  if level not in logging.getLevelNamesMapping():
    raise EnvironmentError(f"Environment variable {EnvName.LOG_LEVEL} has unknown level {level}")
  return level


def get_json_logs() -> bool:
  """Returns True if DATEDIFF_JSON_LOGS requests JSON log output."""
  return os.getenv(EnvName.JSON_LOGS, "").strip().lower() in _TRUTHY

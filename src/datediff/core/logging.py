import logging

import structlog
from structlog.types import Processor

from ..env import get_json_logs, get_log_level

_HANDLER_NAME = "datediff"


def initialize_logging(json_logs: bool | None = None, log_level: str | None = None):
  """
  Routes structlog and stdlib logging through a single structlog-formatted handler.

  datediff never calls this itself. Applications that want its debug output call it once at
  startup, or configure structlog their own way.

  Args:
    json_logs: Render JSON lines instead of console output. Defaults to DATEDIFF_JSON_LOGS.
    log_level: The root log level. Defaults to DATEDIFF_LOG_LEVEL.
  """
  if json_logs is None:
    json_logs = get_json_logs()
  if log_level is None:
    log_level = get_log_level()

  timestamper = structlog.processors.TimeStamper(utc=False, fmt="%H:%M:%S")

  shared_processors: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.stdlib.ExtraAdder(),
    timestamper,
    structlog.processors.StackInfoRenderer(),
  ]

  if json_logs:
    # Format the exception only for JSON logs, as we want to pretty-print them when
    # using the ConsoleRenderer
    shared_processors.append(structlog.processors.format_exc_info)

  structlog.configure(
    processors=shared_processors
    + [
      # Prepare event dict for `ProcessorFormatter`.
      structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
  )

  log_renderer: Processor
  if json_logs:
    log_renderer = structlog.processors.JSONRenderer()
  else:
    log_renderer = structlog.dev.ConsoleRenderer(
      pad_level=False,
      exception_formatter=structlog.dev.RichTracebackFormatter(max_frames=20),
    )

  formatter = structlog.stdlib.ProcessorFormatter(
    # These run ONLY on `logging` entries that do NOT originate within
    # structlog.
    foreign_pre_chain=shared_processors,
    # These run on ALL entries after the pre_chain is done.
    processors=[
      # Remove _record & _from_structlog.
      structlog.stdlib.ProcessorFormatter.remove_processors_meta,
      log_renderer,
    ],
  )

  root_logger = logging.getLogger()
  # Calling this again replaces our handler rather than stacking a second one
  for existing in list(root_logger.handlers):
    if existing.get_name() == _HANDLER_NAME:
      root_logger.removeHandler(existing)

  handler = logging.StreamHandler()
  handler.set_name(_HANDLER_NAME)
  # Use OUR `ProcessorFormatter` to format all `logging` entries.
  handler.setFormatter(formatter)
  root_logger.addHandler(handler)
  root_logger.setLevel(log_level.upper())
  return handler

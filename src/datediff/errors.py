class DateDiffError(ValueError):
  """Base class for errors raised while computing or formatting a date difference."""


class StartAfterEndError(DateDiffError):
  """Raised when the start date is strictly later than the end date."""

  def __init__(self):
    super().__init__("start date is after end date")


class UnknownVerbError(DateDiffError):
  """Raised when a format string contains `%` followed by an unsupported character."""

  def __init__(self, raw_format: str, verb: str):
    self.raw_format = raw_format
    self.verb = verb
    if verb:
      message = f'format "{raw_format}" has unknown verb {verb}'
    else:
      message = f'format "{raw_format}" ends with an incomplete verb'
    super().__init__(message)


class EmptyUnitSetError(DateDiffError):
  """Raised when no calendar unit is selected, i.e. a format string without any verb."""

  def __init__(self):
    super().__init__("undefined dates difference mode")

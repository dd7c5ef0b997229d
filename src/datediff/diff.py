from datetime import date
from typing import Self, override

import structlog
from pydantic import BaseModel, ConfigDict, InstanceOf, NonNegativeInt, model_validator

from .decompose import Counts, decompose
from .errors import EmptyUnitSetError, StartAfterEndError
from .format_spec import parse, render
from .units import UNIT_ORDER, UnitSet

logger = structlog.get_logger()


class DateDiff(BaseModel):
  """The difference between two dates in whole years, months, weeks and days.

  Only the units in `units` were computed; the others are always 0. Two differences are equal
  when their counts are, regardless of how they were selected or will be rendered.
  """

  model_config = ConfigDict(frozen=True)

  years: NonNegativeInt = 0
  months: NonNegativeInt = 0
  weeks: NonNegativeInt = 0
  days: NonNegativeInt = 0

  units: InstanceOf[UnitSet] = UnitSet.ALL
  """The units the difference was computed in."""

  raw_format: str | None = None
  """The format string the difference was created with, if any."""

  @model_validator(mode="after")
  def check_unselected_units_are_zero(self) -> Self:
    for unit in UNIT_ORDER:
      if unit not in self.units and self.of(unit) != 0:
        raise ValueError(f"{unit.noun}s must be 0 when not among the computed units")
    return self

  @property
  def counts(self) -> Counts:
    return Counts(years=self.years, months=self.months, weeks=self.weeks, days=self.days)

  def of(self, unit: UnitSet) -> int:
    """Returns the count for a single unit."""
    return self.counts.of(unit)

  @property
  def template(self) -> str:
    """The format used by `str()`: the creating format string, or one built from `units`."""
    if self.raw_format is not None:
      return self.raw_format
    return self.units.template()

  def equal(self, other: "DateDiff") -> bool:
    return self.counts == other.counts

  def format(self, raw_format: str) -> str:
    """
    Renders the difference with `raw_format`, omitting units whose count is 0.

    Raises:
      UnknownVerbError: If the format contains an unsupported verb.
      EmptyUnitSetError: If the format contains no verbs.
    """
    return render(self, raw_format, elide_zeros=True)

  def format_with_zeros(self, raw_format: str) -> str:
    """
    Renders the difference with `raw_format`, keeping units whose count is 0.

    Raises:
      UnknownVerbError: If the format contains an unsupported verb.
      EmptyUnitSetError: If the format contains no verbs.
    """
    return render(self, raw_format, elide_zeros=False)

  def str_with_zeros(self) -> str:
    return self.format_with_zeros(self.template)

  @override
  def __str__(self) -> str:
    return self.format(self.template)

  @override
  def __format__(self, format_spec: str) -> str:
    if not format_spec:
      return str(self)
    return self.format(format_spec)

  @override
  def __eq__(self, other: object) -> bool:
    if not isinstance(other, DateDiff):
      return NotImplemented
    return self.equal(other)

  @override
  def __hash__(self) -> int:
    return hash(self.counts)


def new_diff(start: date, end: date, raw_format: str) -> DateDiff:
  """
  Computes the difference between two dates in the units named by a format string.

  When the format names several units, they are measured from longest to shortest:

    new_diff(date(2000, 4, 17), date(2003, 3, 16), "%Y")     # 2 years
    new_diff(date(2000, 4, 17), date(2003, 3, 16), "%M")     # 34 months
    new_diff(date(2000, 4, 17), date(2003, 3, 16), "%Y %M")  # 2 years 10 months

  The format is kept, and is what `str()` renders with.

  Raises:
    StartAfterEndError: If `start` is after `end`.
    UnknownVerbError: If the format contains an unsupported verb.
    EmptyUnitSetError: If the format contains no verbs.
  """
  _check_order(start, end)
  spec = parse(raw_format)
  counts = decompose(start, end, spec.units)
  return DateDiff(**counts._asdict(), units=spec.units, raw_format=raw_format)


def new_diff_with_units(start: date, end: date, units: UnitSet) -> DateDiff:
  """
  Computes the difference between two dates in the given units.

    new_diff_with_units(start, end, UnitSet.YEARS | UnitSet.MONTHS)  # 2 years 10 months

  Raises:
    StartAfterEndError: If `start` is after `end`.
    EmptyUnitSetError: If `units` is empty.
  """
  _check_order(start, end)
  if not units:
    logger.debug("Rejected empty unit set")
    raise EmptyUnitSetError()
  counts = decompose(start, end, units)
  return DateDiff(**counts._asdict(), units=units)


def _check_order(start: date, end: date):
  if start > end:
    logger.debug(f"Rejected date pair: {start} is after {end}")
    raise StartAfterEndError()

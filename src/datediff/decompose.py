"""Splits the span between two dates into whole calendar units."""

from datetime import date, timedelta
from typing import NamedTuple

import structlog
from dateutil.relativedelta import relativedelta

from .units import UnitSet

logger = structlog.get_logger()

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7


class Counts(NamedTuple):
  """Whole units elapsed between two dates. Units that were not requested are 0."""

  years: int = 0
  months: int = 0
  weeks: int = 0
  days: int = 0

  def of(self, unit: UnitSet) -> int:
    """Returns the count for a single unit."""
    match unit:
      case UnitSet.YEARS:
        return self.years
      case UnitSet.MONTHS:
        return self.months
      case UnitSet.WEEKS:
        return self.weeks
      case UnitSet.DAYS:
        return self.days
    raise ValueError(f"Not a single unit: {unit}")


def decompose(start: date, end: date, units: UnitSet) -> Counts:
  """
  Measures the span from `start` to `end` in the requested calendar units.

  Units are consumed from longest to shortest, each one advancing a cursor so that shorter
  units only measure what remains. A unit boundary landing exactly on `end` counts as complete.

  Months are the exception: when years are not requested, months report the total number of
  months elapsed (36 across a 3 year span), not the remainder after whole years.

  Args:
    start: The earlier date (or datetime).
    end: The later date (or datetime), of the same type as `start`.
    units: The units to measure in.

  Returns:
    The counts for each unit.
  """
  years = months = weeks = days = 0
  cursor = start

  if UnitSet.YEARS in units:
    years = full_years_between(cursor, end)
    cursor = cursor + relativedelta(years=years)

  if UnitSet.MONTHS in units:
    # Skip ahead by whole years so that only the final year is walked month by month
    offset = 0 if UnitSet.YEARS in units else full_years_between(cursor, end)
    months = full_months_between(cursor, end, at_least=offset * MONTHS_IN_YEAR)
    cursor = cursor + relativedelta(months=months)

  if UnitSet.WEEKS in units:
    weeks = (end - cursor) // timedelta(days=DAYS_IN_WEEK)
    cursor = cursor + timedelta(days=weeks * DAYS_IN_WEEK)

  if UnitSet.DAYS in units:
    days = (end - cursor) // timedelta(days=1)

  counts = Counts(years=years, months=months, weeks=weeks, days=days)
  logger.debug(f"Decomposed {start} -> {end} into {counts}")
  return counts


def full_years_between(start: date, end: date) -> int:
  """Returns the number of whole years from `start` to `end`."""
  years = end.year - start.year
  if start + relativedelta(years=years) > end:
    years -= 1
  return years


def full_months_between(start: date, end: date, at_least: int = 0) -> int:
  """Returns the number of whole months from `start` to `end`.

  Each candidate boundary is computed from `start` directly, so a start on the 31st (or the
  29th of February) lands on the last day of shorter months without drifting earlier in later
  ones. Counting begins at `at_least`, which must already be known to fit.
  """
  months = at_least
  while start + relativedelta(months=months + 1) <= end:
    months += 1
  return months

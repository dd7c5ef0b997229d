from enum import Flag


class UnitSet(Flag):
  """The calendar units a date difference is measured in.

  Members combine with `|`, intersect with `&` and are tested with `in`. The bit values are
  stable and may be persisted.
  """

  DAYS = 16
  """Whole days."""
  WEEKS = 32
  """Whole 7-day weeks."""
  MONTHS = 64
  """Whole calendar months."""
  YEARS = 128
  """Whole calendar years."""

  ALL = YEARS | MONTHS | WEEKS | DAYS
  """Every unit."""

  @classmethod
  def none(cls) -> "UnitSet":
    return cls(0)

  @classmethod
  def from_verb(cls, letter: str) -> "UnitSet | None":
    """Returns the unit named by a verb letter (case-insensitive), or None if unrecognized."""
    return _UNIT_BY_LETTER.get(letter.upper())

  @property
  def noun(self) -> str:
    """The singular English noun for a single unit, i.e. "month"."""
    return _NOUNS[self]

  @property
  def letter(self) -> str:
    """The uppercase verb letter for a single unit, i.e. "M"."""
    return _LETTERS[self]

  def units(self) -> list["UnitSet"]:
    """Returns the single units in this set, longest first."""
    return [unit for unit in UNIT_ORDER if unit in self]

  def template(self) -> str:
    """Returns the canonical format string for this set, i.e. "%Y %M %D"."""
    return " ".join(f"%{unit.letter}" for unit in self.units())


UNIT_ORDER = (UnitSet.YEARS, UnitSet.MONTHS, UnitSet.WEEKS, UnitSet.DAYS)
"""Single units, from longest to shortest."""

_NOUNS = {
  UnitSet.YEARS: "year",
  UnitSet.MONTHS: "month",
  UnitSet.WEEKS: "week",
  UnitSet.DAYS: "day",
}

_LETTERS = {
  UnitSet.YEARS: "Y",
  UnitSet.MONTHS: "M",
  UnitSet.WEEKS: "W",
  UnitSet.DAYS: "D",
}

_UNIT_BY_LETTER = {letter: unit for unit, letter in _LETTERS.items()}

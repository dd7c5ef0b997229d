import pytest

from datediff.decompose import Counts
from datediff.diff import DateDiff
from datediff.errors import EmptyUnitSetError, UnknownVerbError
from datediff.format_spec import Text, Verb, parse, render
from datediff.units import UnitSet


# Parsing
def test_parse_splits_text_and_verbs():
  spec = parse("%Y and %m!")
  assert spec.tokens == (
    Verb(unit=UnitSet.YEARS, noun=True),
    Text(text=" and "),
    Verb(unit=UnitSet.MONTHS, noun=False),
    Text(text="!"),
  )
  assert spec.raw == "%Y and %m!"


@pytest.mark.parametrize(
  "raw, units",
  [
    ("%Y", UnitSet.YEARS),
    ("%y", UnitSet.YEARS),
    ("%m %M", UnitSet.MONTHS),
    ("%W then %d", UnitSet.WEEKS | UnitSet.DAYS),
    ("%D%w%M%y", UnitSet.ALL),
  ],
)
def test_parse_units(raw: str, units: UnitSet):
  assert parse(raw).units == units


@pytest.mark.parametrize(
  "raw, verb",
  [
    ("%X%L %S", "X"),
    ("%Y %%", "%"),
    ("%Y %q", "q"),
  ],
)
def test_parse_unknown_verb(raw: str, verb: str):
  with pytest.raises(UnknownVerbError) as exc_info:
    parse(raw)
  assert exc_info.value.verb == verb
  assert exc_info.value.raw_format == raw
  assert str(exc_info.value) == f'format "{raw}" has unknown verb {verb}'


def test_parse_trailing_percent():
  with pytest.raises(UnknownVerbError) as exc_info:
    parse("%Y %")
  assert exc_info.value.verb == ""


@pytest.mark.parametrize("raw", ["", "   ", "Years and months", "100 percent"])
def test_parse_without_verbs(raw: str):
  with pytest.raises(EmptyUnitSetError, match="undefined dates difference mode"):
    parse(raw)


def test_unknown_verb_is_reported_before_missing_verbs():
  with pytest.raises(UnknownVerbError):
    parse("no verbs but %Z")


# Rendering
@pytest.mark.parametrize(
  "n, expected",
  [
    (0, "0 days"),
    (1, "1 day"),
    (2, "2 days"),
    (21, "21 days"),
  ],
)
def test_pluralization(n: int, expected: str):
  assert render(Counts(days=n), "%D", elide_zeros=False) == expected


def test_lowercase_renders_bare_number():
  assert render(Counts(years=1, months=4), "%y-%m", elide_zeros=False) == "1-4"


def test_elided_zero_takes_one_preceding_space():
  counts = Counts(years=10, months=0, days=29)
  assert render(counts, "%Y %M %D", elide_zeros=True) == "10 years 29 days"
  assert render(counts, "%Y  %M", elide_zeros=True) == "10 years "


def test_elided_leading_zero_keeps_following_text():
  assert render(Counts(months=3), "%Y %M", elide_zeros=True) == " 3 months"


def test_all_zero_elides_to_empty():
  assert render(Counts(), "%Y %M %W %D", elide_zeros=True) == ""


def test_zeros_are_kept_when_not_eliding():
  assert render(Counts(years=10, days=29), "%Y %M %D", elide_zeros=False) == (
    "10 years 0 months 29 days"
  )


def test_repeated_verb_gets_same_replacement():
  assert render(Counts(weeks=2), "%W (%w)", elide_zeros=False) == "2 weeks (2)"


def test_render_accepts_a_date_diff():
  units = UnitSet.YEARS | UnitSet.MONTHS | UnitSet.DAYS
  diff = DateDiff(years=10, months=1, days=29, units=units)
  assert render(diff, "%Y %M %W %D", elide_zeros=True) == "10 years 1 month 29 days"
  assert render(diff, "%w", elide_zeros=False) == "0"


def test_render_validates_format():
  with pytest.raises(EmptyUnitSetError):
    render(Counts(days=5), "days", elide_zeros=True)

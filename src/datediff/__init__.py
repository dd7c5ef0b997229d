from importlib.metadata import version

from .decompose import Counts, decompose
from .diff import DateDiff, new_diff, new_diff_with_units
from .errors import DateDiffError, EmptyUnitSetError, StartAfterEndError, UnknownVerbError
from .format_spec import FormatSpec, parse, render
from .units import UnitSet

PACKAGE = __name__.split(".")[0]
__version__ = version(PACKAGE)

__all__ = [
  "Counts",
  "DateDiff",
  "DateDiffError",
  "EmptyUnitSetError",
  "FormatSpec",
  "StartAfterEndError",
  "UnitSet",
  "UnknownVerbError",
  "decompose",
  "new_diff",
  "new_diff_with_units",
  "parse",
  "render",
]

"""dashlet: small, dependency-free helpers for plain Python data."""

from importlib.metadata import version as _version

__version__ = _version("dashlet")

from dashlet._kinds import ValueKind, kind_of
from dashlet._path import to_path
from dashlet.objects import pick, pick_by, omit, has, last
from dashlet.lang import is_equal, clone_deep
from dashlet.arrays import uniq, uniq_by, xor
from dashlet.strings import escape_reg_exp, uniq_id
from dashlet.function import debounce, Debounced, set_scheduler
# textual NOT auto-imported — opt-in only

__all__ = [
    "pick",
    "pick_by",
    "omit",
    "has",
    "last",
    "is_equal",
    "clone_deep",
    "uniq",
    "uniq_by",
    "xor",
    "escape_reg_exp",
    "uniq_id",
    "debounce",
    "Debounced",
    "set_scheduler",
    "to_path",
    "kind_of",
    "ValueKind",
]

"""String helpers — regex escaping and sequential ids."""

import re

from dashlet import _state

_SPECIAL = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_reg_exp(string: str) -> str:
    r"""Backslash-escape the regex metacharacters . * + ? ^ $ { } ( ) | [ ] \

    Unlike re.escape, nothing else is touched (hyphens, spaces, ...).
    Escaping twice doubles the backslashes.
    """
    return _SPECIAL.sub(r"\\\g<0>", string)


def uniq_id(prefix: str = "") -> str:
    """prefix followed by the next process-wide id: "x_1", "x_2", ..."""
    return f"{prefix}{_state.ids.next()}"

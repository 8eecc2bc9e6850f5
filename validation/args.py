"""Case-insensitive matching of string arguments against a fixed set of choices."""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

from .errors import InvalidInput


def _match_one(arg: str, choices: List[str]) -> str:
    if arg in choices:
        return arg
    hits = [c for c in choices if c.startswith(arg)]
    if len(hits) == 1 and arg:
        return hits[0]
    quoted = ", ".join(f"'{c}'" for c in choices)
    if len(hits) > 1 and arg:
        raise InvalidInput(f"'{arg}' is ambiguous; should be one of {quoted}")
    raise InvalidInput(f"'{arg}' should be one of {quoted}")


def match_arg(
    arg: Optional[Union[str, Sequence[str]]],
    choices: Sequence[str],
    several_ok: bool = False,
) -> Union[str, List[str]]:
    """
    Resolve `arg` against `choices`, ignoring case.

    An exact match wins; otherwise a unique prefix is accepted. ``None``
    selects the first choice. With ``several_ok`` a sequence of strings is
    accepted and a list of matches is returned; every entry must match,
    unlike R's match.arg which drops unmatched entries. Results are lowercased.
    """
    lowered = [str(c).lower() for c in choices]
    if not lowered:
        raise InvalidInput("choices must be non-empty")
    if arg is None:
        return [lowered[0]] if several_ok else lowered[0]
    if isinstance(arg, str):
        matched = _match_one(arg.lower(), lowered)
        return [matched] if several_ok else matched
    if not several_ok:
        raise InvalidInput("arg must be a single string unless several_ok=True")
    items = [str(a).lower() for a in arg]
    if not items:
        raise InvalidInput("arg must name at least one choice")
    return [_match_one(a, lowered) for a in items]


__all__ = ["match_arg"]

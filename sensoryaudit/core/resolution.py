"""Single place where "not found" turns into a default value.

Every lookup that may fail during an audit (an exemplary chapter that does
not exist, a motif name with no keyword list) is routed through
:func:`resolve_or_default`. In the default lenient mode a miss silently
contributes the default; in strict mode it raises
:class:`UnresolvedReferenceError` so callers can surface the problem.
"""

import logging
from typing import Optional, TypeVar

from .errors import UnresolvedReferenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_or_default(
    value: Optional[T],
    default: T,
    *,
    what: str,
    reference: Optional[str] = None,
    strict: bool = False,
) -> T:
    """Return ``value`` if it resolved, otherwise ``default``.

    Args:
        value: The looked-up value, or None when the lookup missed.
        default: What a miss contributes in lenient mode.
        what: Human-readable name of the thing being resolved.
        reference: The identifier that failed to resolve, for messages.
        strict: Raise instead of falling back.
    """
    if value is not None:
        return value

    if strict:
        raise UnresolvedReferenceError(what, reference)

    logger.debug(f"Unresolved {what} {reference!r}; using default")
    return default

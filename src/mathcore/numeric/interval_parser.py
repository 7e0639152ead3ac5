"""Parse interval text such as ``[0.0, 1.0)`` or ``∅`` back into an ``Interval``."""

from __future__ import annotations

import logging
import re

from mathcore.constants.math import EMPTY_SET_SYMBOL
from mathcore.errors import IntervalParseError

from .interval import Interval, IntervalType

logger = logging.getLogger(__name__)

_INTERVAL_PATTERN = re.compile(r"^([\[(])\s*([^,\s]+)\s*,\s*([^,\s]+)\s*([\])])$")

_LEFT_TYPES = {"[": IntervalType.CLOSED, "(": IntervalType.OPEN}
_RIGHT_TYPES = {"]": IntervalType.CLOSED, ")": IntervalType.OPEN}


def _parse_bound(text: str, token: str) -> float:
    try:
        return float(token)
    except ValueError as exc:
        raise IntervalParseError(text, reason=f"Invalid endpoint {token!r}") from exc


def parse_interval(text: str) -> Interval:
    """
    Parse the rendering produced by ``str(Interval)``.

    Accepts ``∅``, any bracket combination, surrounding whitespace and the
    ``Infinity`` / ``-Infinity`` / ``inf`` spellings for unbounded ends.

    Args:
        text: Interval text

    Returns:
        The parsed interval

    Raises:
        IntervalParseError: If the text is not an interval rendering
        IntervalBoundsError: If the endpoints are NaN or inverted
    """
    stripped = text.strip()
    if stripped == EMPTY_SET_SYMBOL:
        return Interval.empty()

    match = _INTERVAL_PATTERN.match(stripped)
    if match is None:
        logger.debug("Unparseable interval text: %r", text)
        raise IntervalParseError(text)

    left, lower_token, upper_token, right = match.groups()
    lower = _parse_bound(text, lower_token)
    upper = _parse_bound(text, upper_token)
    return Interval.create(lower, upper, _LEFT_TYPES[left], _RIGHT_TYPES[right])


__all__ = ["parse_interval"]

"""Pairwise composition over decoded unit sequences."""
from __future__ import annotations

import logging
from typing import List, Sequence

import structlog

from ..utils.units import unit_length
from .table import PrecomposeTable, precompose

logger = structlog.wrap_logger(logging.getLogger(__name__))


def compose_pairs(units: Sequence[int], *, table: PrecomposeTable | None = None) -> List[int]:
    """Replace each base + combining mark pair with its precomposed form.

    Pairs are matched left to right and a composite is never combined again
    with the unit that follows it.
    """

    end = unit_length(units)
    result: List[int] = []
    index = 0
    while index < end:
        if index + 1 < end:
            combined = precompose(units[index], units[index + 1], table=table)
            if combined is not None:
                result.append(combined)
                index += 2
                continue
        result.append(units[index])
        index += 1
    if len(result) != end:
        logger.debug("compose.reduced", before=end, after=len(result))
    return result


__all__ = ["compose_pairs"]

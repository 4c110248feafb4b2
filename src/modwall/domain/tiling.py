"""Fill-region tiling for modular wall layouts.

A fill region is a contiguous span (the whole wall, or one side of a
centered special module) that must be tiled with catalog widths. Either end
of a region may be a true wall boundary, in which case the module touching
it must be edge-eligible.

The search is small and bounded (at most ``max_modules_per_region`` picks
from the catalog), so it is a plain enumeration with no memoization.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import product

from .value_objects import DEFAULT_CATALOG, ModuleCatalog

logger = logging.getLogger(__name__)


class TilingError(ValueError):
    """Raised when a fill region cannot be tiled due to invalid input."""

    pass


@dataclass(frozen=True)
class FillPlan:
    """Module widths chosen for one fill region.

    Attributes:
        span: Width of the region in mm.
        widths: Module widths in left-to-right order.
        exact: True if the widths came from the exact-cover search.
    """

    span: int
    widths: tuple[int, ...]
    exact: bool

    @property
    def covered(self) -> int:
        """Width covered by the planned modules."""
        return sum(self.widths)

    @property
    def gap(self) -> int:
        """Width of the region left uncovered."""
        return self.span - self.covered

    def describe(self) -> str:
        """Widths joined for display, e.g. ``1000mm + 600mm``."""
        return " + ".join(f"{w}mm" for w in self.widths)


def _respects_edges(
    widths: tuple[int, ...],
    catalog: ModuleCatalog,
    left_is_boundary: bool,
    right_is_boundary: bool,
) -> bool:
    if left_is_boundary and not catalog.is_edge_eligible(widths[0]):
        return False
    if right_is_boundary and not catalog.is_edge_eligible(widths[-1]):
        return False
    return True


def find_exact_cover(
    span: int,
    catalog: ModuleCatalog = DEFAULT_CATALOG,
    left_is_boundary: bool = True,
    right_is_boundary: bool = True,
) -> tuple[int, ...] | None:
    """Find the shortest ordered combination of widths summing to span.

    Sequences are enumerated by length, and within a length in catalog
    order, so the first match is the fewest-module cover with ties broken
    by catalog order. Order matters because only the module facing a wall
    boundary is restricted to edge-eligible widths.

    Args:
        span: Width to cover in mm.
        catalog: Module catalog to draw widths from.
        left_is_boundary: Whether the region's left end is a wall end.
        right_is_boundary: Whether the region's right end is a wall end.

    Returns:
        Widths in left-to-right order, an empty tuple for a zero span, or
        None if no exact cover exists.

    Example:
        >>> find_exact_cover(2000)
        (1000, 1000)
        >>> find_exact_cover(2000, right_is_boundary=False)
        (800, 1200)
    """
    if span < 0:
        raise TilingError("Span cannot be negative")
    if span == 0:
        return ()

    for count in range(1, catalog.max_modules_per_region + 1):
        # Every sequence of this length is too short or too long
        if count * catalog.widths[-1] < span or count * catalog.smallest > span:
            continue
        for widths in product(catalog.widths, repeat=count):
            if sum(widths) != span:
                continue
            if _respects_edges(widths, catalog, left_is_boundary, right_is_boundary):
                return widths
    return None


def greedy_fill(
    span: int,
    catalog: ModuleCatalog = DEFAULT_CATALOG,
    left_is_boundary: bool = True,
    right_is_boundary: bool = True,
) -> tuple[int, ...]:
    """Fill a span largest-first when no exact cover exists.

    Picks the largest width that fits, subject to the edge rules: the first
    module must be edge-eligible when the left end is a wall boundary, and
    the module that ends the run (because the region is full or the
    remainder drops below the smallest width) must be edge-eligible when
    the right end is a wall boundary. Stops when the remainder is below the
    smallest catalog width or the region holds the maximum module count.

    The result may leave an uncovered remainder; callers report it as a
    soft minimal-gap condition.
    """
    if span < 0:
        raise TilingError("Span cannot be negative")

    widths: list[int] = []
    remaining = span
    descending = sorted(catalog.widths, reverse=True)

    while remaining >= catalog.smallest and len(widths) < catalog.max_modules_per_region:
        is_first = not widths
        is_last_slot = len(widths) == catalog.max_modules_per_region - 1

        chosen = None
        for width in descending:
            if width > remaining:
                continue
            if is_first and left_is_boundary and not catalog.is_edge_eligible(width):
                continue
            ends_run = is_last_slot or remaining - width < catalog.smallest
            if ends_run and right_is_boundary and not catalog.is_edge_eligible(width):
                continue
            chosen = width
            break

        if chosen is None:
            break
        widths.append(chosen)
        remaining -= chosen

    return tuple(widths)


def fill_span(
    span: int,
    catalog: ModuleCatalog = DEFAULT_CATALOG,
    left_is_boundary: bool = True,
    right_is_boundary: bool = True,
) -> FillPlan:
    """Plan the modules for one fill region.

    Tries the exact-cover search first and falls back to a greedy
    largest-fit pass, which may leave a gap.

    Args:
        span: Region width in mm. Zero yields an empty plan.
        catalog: Module catalog to draw widths from.
        left_is_boundary: Whether the region's left end is a wall end.
        right_is_boundary: Whether the region's right end is a wall end.

    Returns:
        FillPlan with the chosen widths.

    Raises:
        TilingError: If span is negative.
    """
    exact = find_exact_cover(span, catalog, left_is_boundary, right_is_boundary)
    if exact is not None:
        logger.debug(f"Exact cover for {span}mm: {exact}")
        return FillPlan(span=span, widths=exact, exact=True)

    widths = greedy_fill(span, catalog, left_is_boundary, right_is_boundary)
    plan = FillPlan(span=span, widths=widths, exact=False)
    logger.debug(
        f"No exact cover for {span}mm, greedy fill {widths} leaves {plan.gap}mm"
    )
    return plan

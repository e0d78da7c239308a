"""
Cell identifier resolution

Turn freeform text (typed, copy-pasted, JSON arrays, base-10 integers) into
canonical cell identifiers. Resolution is total: malformed tokens resolve to
nothing and never abort a batch.

Resolution order for one token, first match wins:
1. canonical cell string
2. base-10 integer, split into 32-bit halves and repacked
3. comma separated list (each piece resolved recursively)
4. leading "[" stripped
5. trailing "]" stripped
6. JSON array (each element resolved) or JSON string
7. nothing
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from hexview.grid.base import CellGrid
from hexview.grid.h3_grid import get_default_grid

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[0-9]+")
_UINT32_MASK = 0xFFFFFFFF


@dataclass
class ResolveResult:
    """
    Outcome of resolving a batch of tokens

    Attributes:
        cells: Unique canonical cells in first-seen order
        rejected: Input tokens that produced no cell
    """

    cells: list[str] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)


def resolve_token(text: Any, grid: CellGrid | None = None) -> list[str]:
    """
    Resolve one token into cell identifiers

    Args:
        text: Raw token (non-strings are converted with ``str``; ``None`` is empty)
        grid: CellGrid instance (default: shared H3Grid)

    Returns:
        Canonical cells in input order; may contain duplicates, empty when
        nothing could be parsed

    Examples:
        >>> resolve_token("8a1fb46622dffff")
        ['8a1fb46622dffff']
        >>> resolve_token("[8a1fb46622dffff, 8a1fb46622affff]")
        ['8a1fb46622dffff', '8a1fb46622affff']
        >>> resolve_token("not-a-cell")
        []
    """
    if text is None:
        return []
    grid = grid or get_default_grid()
    token = str(text).strip()
    if not token:
        return []

    if grid.is_valid_cell(token):
        return [grid.canonical(token)]

    if _DECIMAL.fullmatch(token):
        cell = _decimal_to_cell(token, grid)
        if cell is not None:
            return [cell]

    if "," in token:
        return [cell for piece in token.split(",") for cell in resolve_token(piece, grid)]

    if token.startswith("["):
        return resolve_token(token.lstrip("["), grid)

    if token.endswith("]"):
        return resolve_token(token.rstrip("]"), grid)

    return _resolve_json(token, grid)


def parse(text: Any, grid: CellGrid | None = None) -> set[str]:
    """Resolve one token into a set of cells"""
    return set(resolve_token(text, grid))


def resolve_tokens(tokens: Iterable[Any], grid: CellGrid | None = None) -> ResolveResult:
    """
    Resolve a list of UI tokens

    Args:
        tokens: Raw tokens as entered; ``None`` entries are skipped
        grid: CellGrid instance (default: shared H3Grid)

    Returns:
        ResolveResult with ordered unique cells and the rejected tokens

    Examples:
        >>> result = resolve_tokens(["8a1fb46622dffff", "oops", "8a1fb46622dffff"])
        >>> result.cells, result.rejected
        (['8a1fb46622dffff'], ['oops'])
    """
    grid = grid or get_default_grid()
    seen: dict[str, None] = {}
    rejected: list[str] = []

    for token in tokens:
        if token is None:
            continue
        cells = resolve_token(token, grid)
        if not cells:
            rejected.append(str(token))
            continue
        for cell in cells:
            seen.setdefault(cell, None)

    if rejected:
        logger.debug("Could not resolve %d token(s)", len(rejected))
    return ResolveResult(cells=list(seen), rejected=rejected)


def _decimal_to_cell(digits: str, grid: CellGrid) -> str | None:
    try:
        value = int(digits)
    except ValueError:
        # Longer than the interpreter allows for str -> int conversion
        return None
    low = value & _UINT32_MASK
    high = (value >> 32) & _UINT32_MASK
    try:
        cell = grid.int_pair_to_cell(low, high)
    except (ValueError, OverflowError):
        return None
    if grid.is_valid_cell(cell):
        return cell
    return None


def _resolve_json(token: str, grid: CellGrid) -> list[str]:
    try:
        value = json.loads(token)
    except (ValueError, RecursionError):
        return []

    if isinstance(value, list):
        return [cell for item in value for cell in resolve_token(_stringify(item), grid)]
    if isinstance(value, str):
        return resolve_token(value, grid)
    return []


def _stringify(item: Any) -> str | None:
    if item is None:
        return None
    if isinstance(item, str):
        return item
    return json.dumps(item)

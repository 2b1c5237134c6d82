"""Flyer token matcher for renocost.

Ranks scanned retail-flyer items against a scope line by token overlap.
The score for a candidate is the share of the line's tokens it contains,
plus a flat boost when any of its tokens hints at the line's unit
(e.g. "trim" for a linear-foot line). Items with no usable text never match.
"""

import re
from typing import Iterable, List, Mapping, Optional, Sequence, Union

import structlog

from renocost.config.settings import settings
from renocost.models.estimate import LineItemCost
from renocost.models.flyer import FlyerItem, FlyerMatch
from renocost.models.scope import ScopeLineItem

logger = structlog.get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

STOP_WORDS = frozenset({
    "the", "and", "for", "with", "from", "new", "mid", "range",
    # units
    "inch", "in", "ft", "sq", "sqft", "per", "each", "pack", "pcs",
    "piece", "pieces", "item",
    # generic work words
    "install", "installation", "general",
})

MIN_TOKEN_LENGTH = 3
MAX_TOKENS = 40
UNIT_HINT_BOOST = 0.2
NOISE_FLOOR = 0.05
SCORE_PRECISION = 4

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")

LineLike = Union[ScopeLineItem, LineItemCost, Mapping[str, object]]


# =============================================================================
# TOKENS
# =============================================================================


def normalize_tokens(*texts: Optional[str]) -> List[str]:
    """Tokenize free text for matching.

    Lower-cases, replaces punctuation with spaces, drops short tokens and
    stop words, de-duplicates in first-seen order and caps the result.

    Example:
        >>> normalize_tokens("Luxury Vinyl Plank 12mm", "sqft")
        ['luxury', 'vinyl', 'plank', '12mm']
    """
    raw = " ".join(t for t in texts if isinstance(t, str) and t.strip()).lower()
    tokens: List[str] = []
    seen = set()
    for token in _NON_ALNUM.sub(" ", raw).split():
        if len(token) < MIN_TOKEN_LENGTH or token in STOP_WORDS or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
        if len(tokens) == MAX_TOKENS:
            break
    return tokens


def unit_hint_tokens(unit: Optional[str]) -> List[str]:
    """Domain words that suggest a product is sold in the line's unit."""
    u = (unit or "").lower()
    if "sqft" in u or "sq ft" in u:
        return ["sqft", "floor", "tile", "sheet"]
    if "linear" in u:
        return ["linear", "trim", "baseboard"]
    if "sheet" in u:
        return ["sheet", "drywall"]
    if "set" in u:
        return ["set", "bundle"]
    if "room" in u:
        return ["room", "vanity", "fixture"]
    return []


def _candidate_tokens(item: FlyerItem) -> List[str]:
    if item.normalized_tokens is not None:
        cleaned = (t.strip().lower() for t in item.normalized_tokens)
        return list(dict.fromkeys(t for t in cleaned if t))
    return normalize_tokens(item.name, item.unit_label, item.promo_notes)


def _line_fields(line: LineLike):
    if isinstance(line, Mapping):
        get = line.get
        return (
            get("task"),
            get("material_name", get("materialName")),
            get("material"),
            get("unit"),
        )
    return (
        getattr(line, "task", None),
        getattr(line, "material_name", None),
        getattr(line, "material", None),
        getattr(line, "unit", None),
    )


# =============================================================================
# MATCHING
# =============================================================================


def score_flyer_item(
    item: FlyerItem,
    line_tokens: Sequence[str],
    hints: Iterable[str],
) -> Optional[float]:
    """Score one candidate against a line's tokens.

    Returns:
        The score rounded to 4 decimals, or None when the pair cannot match
        (empty token sets) or the score is at or below the noise floor.
    """
    item_tokens = _candidate_tokens(item)
    if not item_tokens or not line_tokens:
        return None

    targets = set(line_tokens)
    hint_set = set(hints)
    overlap = sum(1 for t in item_tokens if t in targets)
    score = overlap / max(len(line_tokens), 1)
    if any(t in hint_set for t in item_tokens):
        score += UNIT_HINT_BOOST
    if score <= NOISE_FLOOR:
        return None
    return round(score, SCORE_PRECISION)


def match_flyer_items(
    candidates: Iterable[Union[FlyerItem, Mapping[str, object]]],
    line: LineLike,
    limit: Optional[int] = None,
) -> List[FlyerMatch]:
    """Rank flyer items for a scope line.

    Args:
        candidates: Flyer items (models or raw mappings).
        line: Scope line, priced line, or a mapping with task/material/unit.
        limit: Maximum results to return; defaults to
            ``settings.flyer_match_limit`` (4).

    Returns:
        Matches sorted by descending score; equal scores keep input order.
    """
    if limit is None:
        limit = settings.flyer_match_limit
    if limit <= 0:
        return []

    task, material_name, material, unit = _line_fields(line)
    line_tokens = normalize_tokens(task, material_name, material)
    hints = unit_hint_tokens(unit)

    matches: List[FlyerMatch] = []
    considered = 0
    for raw in candidates:
        considered += 1
        item = raw if isinstance(raw, FlyerItem) else FlyerItem.model_validate(raw)
        score = score_flyer_item(item, line_tokens, hints)
        if score is not None:
            matches.append(FlyerMatch(item=item, match_score=score))

    # sorted() is stable, so ties keep candidate order
    ranked = sorted(matches, key=lambda m: m.match_score, reverse=True)[:limit]

    logger.debug(
        "flyer_items_matched",
        candidates=considered,
        matched=len(matches),
        returned=len(ranked),
        line_tokens=len(line_tokens),
    )
    return ranked

"""Estimate sanity review for renocost.

Flags lines whose numbers look implausible for the kind of work, and pairs
of lines in the same area that probably price the same work twice.
"""

import re
from typing import Dict, List

import structlog

from renocost.models.estimate import EstimateResult, EstimateReview, LineItemCost

logger = structlog.get_logger(__name__)

LOW_MATERIAL_COST_THRESHOLD = 150.0

_HEAVY_TRADES = ("kitchen", "bathroom", "plumbing", "electrical")
_PACKAGE_TASK = re.compile(r"renovat|full|complete", re.I)
_PACKAGE_SEGMENT = re.compile(r"kitchen|bathroom|basement|whole", re.I)
_PACKAGE_UNIT = re.compile(r"each|house|set")

# (package task phrase, component task word) pairs that overlap when in one area
_OVERLAP_PAIRS = (
    ("bathroom renovation", "tile"),
    ("kitchen renovation", "cabinet"),
)


def _line_warnings(line: LineItemCost) -> List[str]:
    warnings = []
    text = f"{line.segment} {line.task}".lower()
    if any(t in text for t in _HEAVY_TRADES) and line.material_cost < LOW_MATERIAL_COST_THRESHOLD:
        warnings.append(
            f'Low material cost detected for "{line.task}" - review quantity/unit cost.'
        )
    if (
        _PACKAGE_TASK.search(line.task)
        and _PACKAGE_SEGMENT.search(line.segment)
        and _PACKAGE_UNIT.search(line.unit.lower())
    ):
        warnings.append(
            f'Package "{line.task}" may be under-quantified ({line.quantity:g} {line.unit}).'
        )
    return warnings


def _same_area(a: LineItemCost, b: LineItemCost) -> bool:
    a_seg = a.segment.lower()
    b_seg = b.segment.lower()
    return a_seg == b_seg or a_seg in b_seg or b_seg in a_seg


def _overlaps(a: LineItemCost, b: LineItemCost) -> bool:
    a_task = a.task.lower()
    b_task = b.task.lower()
    for package, component in _OVERLAP_PAIRS:
        if (package in a_task and component in b_task) or (package in b_task and component in a_task):
            return True
    return False


def review_estimate(result: EstimateResult) -> EstimateReview:
    """Collect line and overlap warnings for an estimate.

    Args:
        result: A computed (and optionally adjusted) estimate.

    Returns:
        EstimateReview; overlap warnings are de-duplicated in first-seen order.
    """
    line_warnings: List[str] = []
    for line in result.lines:
        line_warnings.extend(_line_warnings(line))

    overlap: Dict[str, None] = {}
    lines = result.lines
    for i, a in enumerate(lines):
        for b in lines[i + 1:]:
            if _same_area(a, b) and _overlaps(a, b):
                overlap.setdefault(f'Possible overlap in {a.segment}: "{a.task}" and "{b.task}".')

    review = EstimateReview(line_warnings=line_warnings, overlap_warnings=list(overlap))
    if review.has_warnings:
        logger.info(
            "estimate_review_warnings",
            line_warnings=len(review.line_warnings),
            overlap_warnings=len(review.overlap_warnings),
        )
    return review

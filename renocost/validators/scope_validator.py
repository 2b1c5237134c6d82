"""Caller-side validation of scope line items.

The estimate computer tolerates degenerate input (it clamps bad quantities
to zero-cost lines). Callers that want to reject such input up front run
these checks before pricing.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError
import structlog

from renocost.config.errors import ErrorCode, ValidationError
from renocost.models.scope import ScopeLineItem

logger = structlog.get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of scope validation."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    codes: List[str] = field(default_factory=list)
    parsed: List[ScopeLineItem] = field(default_factory=list)

    def add(self, code: str, message: str) -> None:
        self.is_valid = False
        self.codes.append(code)
        self.errors.append(message)


def _check_item(item: ScopeLineItem, result: ValidationResult) -> None:
    label = item.id or "<no id>"
    if not math.isfinite(item.quantity) or item.quantity <= 0:
        result.add(
            ErrorCode.INVALID_QUANTITY,
            f"{label}: quantity must be a positive number, got {item.quantity}",
        )
    if not item.unit.strip():
        result.add(ErrorCode.INVALID_UNIT, f"{label}: unit is required")
    if item.labor_hours is not None and (
        not math.isfinite(item.labor_hours) or item.labor_hours < 0
    ):
        result.add(
            ErrorCode.INVALID_LABOR_HOURS,
            f"{label}: labor hours must be zero or more, got {item.labor_hours}",
        )


def validate_scope_items(
    items: Iterable[Union[ScopeLineItem, Mapping[str, Any]]],
) -> ValidationResult:
    """Validate scope items before pricing.

    Args:
        items: Scope items as models or raw mappings.

    Returns:
        ValidationResult with is_valid, errors and the parsed items.
    """
    result = ValidationResult()
    for index, raw in enumerate(items):
        try:
            item = raw if isinstance(raw, ScopeLineItem) else ScopeLineItem.model_validate(raw)
        except PydanticValidationError as e:
            for err in e.errors():
                result.add(ErrorCode.VALIDATION_ERROR, f"item[{index}] {err['loc']}: {err['msg']}")
            continue
        result.parsed.append(item)
        _check_item(item, result)

    if not result.parsed and not result.errors:
        result.add(ErrorCode.EMPTY_SCOPE, "At least one scope item is required")

    if not result.is_valid:
        logger.warning("scope_validation_failed", errors=result.errors)
    return result


def ensure_valid_scope_items(
    items: Iterable[Union[ScopeLineItem, Mapping[str, Any]]],
) -> List[ScopeLineItem]:
    """Validate scope items and raise on the first problem set.

    Raises:
        ValidationError: With the first error code and all messages in details.
    """
    result = validate_scope_items(items)
    if not result.is_valid:
        raise ValidationError(
            result.errors[0],
            field="scope_items",
            code=result.codes[0],
            details={"errors": result.errors},
        )
    return result.parsed

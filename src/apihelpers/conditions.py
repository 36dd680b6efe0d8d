"""Helpers for managing the status conditions of a CRD."""

import logging
from typing import Optional

from apihelpers.clock import DEFAULT_CLOCK, Clock
from apihelpers.crd.base import ConditionStatus, CRDCondition, CustomResourceDefinition

logger = logging.getLogger(__name__)


def set_crd_condition(
    crd: CustomResourceDefinition,
    new_condition: CRDCondition,
    clock: Optional[Clock] = None,
):
    """Insert or update a condition on the CRD status, in place.

    The transition time only moves when the status changes, unless the new
    condition carries an explicit lastTransitionTime. Reason and message are
    always taken from the new condition. New condition types are appended so
    the order of existing entries is stable.

    Args:
        crd: The resource to update
        new_condition: Condition to record
        clock: Time source for missing transition times (defaults to UTC now)
    """
    clock = clock or DEFAULT_CLOCK
    existing = find_crd_condition(crd, new_condition.type)

    if existing is None:
        condition = new_condition.model_copy(deep=True)
        if condition.lastTransitionTime is None:
            condition.lastTransitionTime = clock.now()
        crd.status.conditions.append(condition)
        logger.debug(
            f"Added condition {condition.type}={condition.status.value} "
            f"to {crd.metadata.name}"
        )
        return

    if existing.status != new_condition.status:
        logger.debug(
            f"Condition {existing.type} on {crd.metadata.name} transitioned "
            f"{existing.status.value} -> {new_condition.status.value}"
        )
        existing.status = new_condition.status
        existing.lastTransitionTime = new_condition.lastTransitionTime or clock.now()
    elif new_condition.lastTransitionTime is not None:
        existing.lastTransitionTime = new_condition.lastTransitionTime
    elif existing.lastTransitionTime is None:
        existing.lastTransitionTime = clock.now()

    existing.reason = new_condition.reason
    existing.message = new_condition.message


def remove_crd_condition(crd: CustomResourceDefinition, condition_type: str):
    """Remove every condition with the given type, keeping the others in order."""
    conditions = crd.status.conditions
    remaining = [c for c in conditions if c.type != condition_type]
    if len(remaining) != len(conditions):
        logger.debug(f"Removed condition {condition_type} from {crd.metadata.name}")
    conditions[:] = remaining


def find_crd_condition(
    crd: CustomResourceDefinition, condition_type: str
) -> Optional[CRDCondition]:
    """Return the live condition entry of the given type, or None."""
    for condition in crd.status.conditions:
        if condition.type == condition_type:
            return condition
    return None


def is_crd_condition_true(crd: CustomResourceDefinition, condition_type: str) -> bool:
    return is_crd_condition_present_and_equal(crd, condition_type, ConditionStatus.TRUE)


def is_crd_condition_false(crd: CustomResourceDefinition, condition_type: str) -> bool:
    return is_crd_condition_present_and_equal(crd, condition_type, ConditionStatus.FALSE)


def is_crd_condition_present_and_equal(
    crd: CustomResourceDefinition, condition_type: str, status: ConditionStatus
) -> bool:
    condition = find_crd_condition(crd, condition_type)
    return condition is not None and condition.status == status


def is_crd_condition_equivalent(
    lhs: Optional[CRDCondition], rhs: Optional[CRDCondition]
) -> bool:
    """Compare two conditions, ignoring lastTransitionTime."""
    if lhs is None or rhs is None:
        return lhs is None and rhs is None

    return (
        lhs.type == rhs.type
        and lhs.status == rhs.status
        and lhs.reason == rhs.reason
        and lhs.message == rhs.message
    )

"""Conversion between raw resource bodies and the typed CRD model.

kopf hands handlers the object as a ``body`` mapping and expects status
changes to be written into ``patch.status``. These helpers let a handler
work on a ``CustomResourceDefinition`` and then emit plain JSON-ready dicts.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from apihelpers.crd.base import CustomResourceDefinition


def crd_from_body(body: Mapping[str, Any]) -> CustomResourceDefinition:
    """Validate a resource body into a CustomResourceDefinition.

    Raises:
        pydantic.ValidationError: If required fields are missing or mistyped
    """
    return CustomResourceDefinition.model_validate(dict(body))


def format_time(value: datetime) -> str:
    """Format a timestamp as RFC 3339 in UTC with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def conditions_patch(crd: CustomResourceDefinition) -> List[Dict[str, Any]]:
    """Serialise the condition list for ``patch.status["conditions"]``."""
    conditions = []
    for condition in crd.status.conditions:
        item = {
            "type": condition.type,
            "status": condition.status.value,
            "reason": condition.reason,
            "message": condition.message,
        }
        if condition.lastTransitionTime is not None:
            item["lastTransitionTime"] = format_time(condition.lastTransitionTime)
        conditions.append(item)
    return conditions


def finalizers_patch(crd: CustomResourceDefinition) -> Dict[str, Any]:
    """Build a merge patch that replaces the finalizer list."""
    return {"metadata": {"finalizers": list(crd.metadata.finalizers)}}

"""Finalizer membership helpers."""

import logging

from apihelpers.crd.base import CustomResourceDefinition

logger = logging.getLogger(__name__)


def crd_has_finalizer(crd: CustomResourceDefinition, name: str) -> bool:
    return name in crd.metadata.finalizers


def crd_add_finalizer(crd: CustomResourceDefinition, name: str) -> bool:
    """Append the finalizer unless it is already present.

    Returns:
        bool: True if the finalizer list changed
    """
    if crd_has_finalizer(crd, name):
        return False
    crd.metadata.finalizers.append(name)
    return True


def crd_remove_finalizer(crd: CustomResourceDefinition, name: str):
    """Remove every occurrence of the finalizer, keeping the rest in order."""
    finalizers = crd.metadata.finalizers
    remaining = [f for f in finalizers if f != name]
    if len(remaining) != len(finalizers):
        logger.debug(f"Removed finalizer {name} from {crd.metadata.name}")
    # Slice assignment keeps the caller's list object.
    finalizers[:] = remaining

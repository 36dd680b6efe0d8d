"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from apihelpers.clock import FakeClock
from apihelpers.crd.base import (
    CRDCondition,
    CRDMetadata,
    CRDNames,
    CRDSpec,
    CustomResourceDefinition,
)


def make_crd(conditions=None, finalizers=None, annotations=None, group="group.com", versions=None):
    """Build a minimal CRD named plural.<group>."""
    crd = CustomResourceDefinition(
        metadata=CRDMetadata(
            name=f"plural.{group}",
            resourceVersion="12",
            annotations=annotations or {},
            finalizers=finalizers or [],
        ),
        spec=CRDSpec(
            group=group,
            names=CRDNames(plural="plural", singular="singular", kind="kind", listKind="listkind"),
            versions=versions or [],
        ),
    )
    crd.status.conditions = list(conditions or [])
    return crd


def condition(type_, status, reason="", message="", when=None):
    return CRDCondition(
        type=type_,
        status=status,
        reason=reason,
        message=message,
        lastTransitionTime=when,
    )


def utc(year, month, day):
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FakeClock:
    """Deterministic clock starting at 2019-06-01T00:00:00Z."""
    return FakeClock(utc(2019, 6, 1))

"""Typed CustomResourceDefinition models."""

from .base import (
    ConditionStatus,
    ConditionType,
    CRDCondition,
    CRDMetadata,
    CRDNames,
    CRDPrinterColumn,
    CRDSpec,
    CRDStatus,
    CRDVersion,
    CustomResourceDefinition,
)

__all__ = [
    "ConditionStatus",
    "ConditionType",
    "CRDCondition",
    "CRDMetadata",
    "CRDNames",
    "CRDPrinterColumn",
    "CRDSpec",
    "CRDStatus",
    "CRDVersion",
    "CustomResourceDefinition",
]

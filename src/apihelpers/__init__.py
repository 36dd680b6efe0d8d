"""Status and approval helpers for CustomResourceDefinition objects."""

from .approval import (
    ApprovalState,
    DEFAULT_PROTECTED_GROUPS,
    KUBE_API_APPROVED_ANNOTATION,
    ProtectedGroups,
    approval_condition,
    get_api_approval_state,
    is_protected_community_group,
)
from .clock import Clock, FakeClock, SystemClock
from .conditions import (
    find_crd_condition,
    is_crd_condition_equivalent,
    is_crd_condition_false,
    is_crd_condition_present_and_equal,
    is_crd_condition_true,
    remove_crd_condition,
    set_crd_condition,
)
from .crd import (
    ConditionStatus,
    ConditionType,
    CRDCondition,
    CRDMetadata,
    CRDSpec,
    CRDStatus,
    CustomResourceDefinition,
)
from .errors import (
    CRDHelperError,
    InvalidApprovalAnnotation,
    NoStorageVersion,
    VersionNotFound,
)
from .finalizers import crd_add_finalizer, crd_has_finalizer, crd_remove_finalizer

__all__ = [
    "ApprovalState",
    "DEFAULT_PROTECTED_GROUPS",
    "KUBE_API_APPROVED_ANNOTATION",
    "ProtectedGroups",
    "approval_condition",
    "get_api_approval_state",
    "is_protected_community_group",
    "Clock",
    "FakeClock",
    "SystemClock",
    "find_crd_condition",
    "is_crd_condition_equivalent",
    "is_crd_condition_false",
    "is_crd_condition_present_and_equal",
    "is_crd_condition_true",
    "remove_crd_condition",
    "set_crd_condition",
    "ConditionStatus",
    "ConditionType",
    "CRDCondition",
    "CRDMetadata",
    "CRDSpec",
    "CRDStatus",
    "CustomResourceDefinition",
    "CRDHelperError",
    "InvalidApprovalAnnotation",
    "NoStorageVersion",
    "VersionNotFound",
    "crd_add_finalizer",
    "crd_has_finalizer",
    "crd_remove_finalizer",
]

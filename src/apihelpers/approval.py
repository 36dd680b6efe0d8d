"""Classification of the Kubernetes API approval annotation.

CRDs in the community-owned ``k8s.io`` and ``kubernetes.io`` groups must carry
the ``api-approved.kubernetes.io`` annotation, pointing at the pull request
where the API was reviewed, or explicitly opting out with ``unapproved``.
"""

import logging
import re
from enum import Enum
from typing import Dict, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel

from apihelpers.crd.base import (
    ConditionStatus,
    ConditionType,
    CRDCondition,
    CustomResourceDefinition,
)
from apihelpers.errors import InvalidApprovalAnnotation

logger = logging.getLogger(__name__)

KUBE_API_APPROVED_ANNOTATION = "api-approved.kubernetes.io"
UNAPPROVED_PREFIX = "unapproved"

# DNS names, IPv4 addresses and bracket-stripped IPv6 literals.
_HOST_PATTERN = re.compile(r"^(?:[a-z0-9_-]+(?:\.[a-z0-9_-]+)*\.?|[0-9a-f:.]+)$")


class ApprovalState(str, Enum):
    """Outcome of classifying the approval annotation."""

    API_APPROVED = "APIApproved"
    API_APPROVAL_BYPASSED = "APIApprovalBypassed"
    API_APPROVAL_MISSING = "APIApprovalMissing"
    API_APPROVAL_INVALID = "APIApprovalInvalid"


class ProtectedGroups(BaseModel):
    """Root domains whose API groups require approval."""

    roots: Tuple[str, ...] = ("k8s.io", "kubernetes.io")

    class Config:
        frozen = True

    def matches(self, group: str) -> bool:
        """Return True if the group is a root or a subdomain of one."""
        for root in self.roots:
            if group == root or group.endswith("." + root):
                return True
        return False


DEFAULT_PROTECTED_GROUPS = ProtectedGroups()


def is_protected_community_group(
    group: str, protected: ProtectedGroups = DEFAULT_PROTECTED_GROUPS
) -> bool:
    """Return True if the API group lives under a protected root domain.

    Matching is on whole dot-separated labels, so ``sigs.k8s.io`` is
    protected but ``notk8s.io`` is not.
    """
    return protected.matches(group)


def get_api_approval_state(
    annotations: Optional[Dict[str, str]],
) -> Tuple[ApprovalState, Optional[InvalidApprovalAnnotation]]:
    """Classify the approval annotation.

    Args:
        annotations: The resource's annotation mapping (may be None)

    Returns:
        tuple: (ApprovalState, error). The error is only set for
        ``API_APPROVAL_INVALID`` and explains which URL constraint failed.
    """
    value = (annotations or {}).get(KUBE_API_APPROVED_ANNOTATION, "")
    if not value:
        return ApprovalState.API_APPROVAL_MISSING, None

    if value.startswith(UNAPPROVED_PREFIX):
        return ApprovalState.API_APPROVAL_BYPASSED, None

    error = _validate_approval_url(value)
    if error is not None:
        logger.debug(f"Invalid {KUBE_API_APPROVED_ANNOTATION} annotation: {error}")
        return ApprovalState.API_APPROVAL_INVALID, error

    return ApprovalState.API_APPROVED, None


def _validate_approval_url(value: str) -> Optional[InvalidApprovalAnnotation]:
    if any(ch.isspace() or not ch.isprintable() for ch in value):
        return InvalidApprovalAnnotation(
            value, "not a valid URL (contains whitespace or control characters)"
        )

    try:
        parsed = urlparse(value)
        host = parsed.hostname
        # Raises ValueError for a non-numeric or out-of-range port.
        parsed.port
    except ValueError as e:
        return InvalidApprovalAnnotation(value, f"not a valid URL ({e})")

    if not parsed.scheme:
        return InvalidApprovalAnnotation(value, "URL must include a scheme")
    if not host:
        return InvalidApprovalAnnotation(value, "URL must include a host")
    if not _HOST_PATTERN.match(host):
        return InvalidApprovalAnnotation(value, f"not a valid URL (invalid host {host!r})")
    return None


def approval_condition(
    crd: CustomResourceDefinition,
    protected: ProtectedGroups = DEFAULT_PROTECTED_GROUPS,
) -> Optional[CRDCondition]:
    """Build the KubernetesAPIApprovalPolicyConformant condition for a CRD.

    Returns None when the CRD's group is not protected, in which case the
    policy does not apply and no condition should be recorded.
    """
    if not is_protected_community_group(crd.spec.group, protected):
        return None

    annotations = crd.metadata.annotations
    state, error = get_api_approval_state(annotations)
    value = annotations.get(KUBE_API_APPROVED_ANNOTATION, "")
    condition_type = ConditionType.API_APPROVAL_POLICY_CONFORMANT.value

    if state == ApprovalState.API_APPROVED:
        return CRDCondition(
            type=condition_type,
            status=ConditionStatus.TRUE,
            reason="ApprovedAnnotation",
            message=f"approved in {value}",
        )
    if state == ApprovalState.API_APPROVAL_BYPASSED:
        return CRDCondition(
            type=condition_type,
            status=ConditionStatus.FALSE,
            reason="UnapprovedAnnotation",
            message=f"not approved: {value!r}",
        )
    if state == ApprovalState.API_APPROVAL_INVALID:
        return CRDCondition(
            type=condition_type,
            status=ConditionStatus.FALSE,
            reason="InvalidAnnotation",
            message=f"invalid {KUBE_API_APPROVED_ANNOTATION} annotation: {error}",
        )
    return CRDCondition(
        type=condition_type,
        status=ConditionStatus.FALSE,
        reason="MissingAnnotation",
        message=(
            f"protected groups must have approval annotation "
            f"{KUBE_API_APPROVED_ANNOTATION!r}, see "
            f"https://github.com/kubernetes/enhancements/pull/1111"
        ),
    )

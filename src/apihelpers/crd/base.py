"""Typed models for CustomResourceDefinition objects."""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, Dict, List, Any
from datetime import datetime


class ConditionStatus(str, Enum):
    """Tri-state status of a condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ConditionType(str, Enum):
    """Well-known CRD condition types."""

    ESTABLISHED = "Established"
    NAMES_ACCEPTED = "NamesAccepted"
    NON_STRUCTURAL_SCHEMA = "NonStructuralSchema"
    TERMINATING = "Terminating"
    API_APPROVAL_POLICY_CONFORMANT = "KubernetesAPIApprovalPolicyConformant"


class CRDMetadata(BaseModel):
    """Standard Kubernetes metadata for CRDs."""

    name: str
    namespace: Optional[str] = None
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)
    finalizers: List[str] = Field(default_factory=list)
    resourceVersion: Optional[str] = None
    generation: Optional[int] = None

    class Config:
        extra = "allow"


class CRDCondition(BaseModel):
    """Kubernetes condition attached to a CRD status."""

    type: str
    status: ConditionStatus
    reason: str = ""
    message: str = ""
    lastTransitionTime: Optional[datetime] = None

    class Config:
        validate_assignment = True


class CRDNames(BaseModel):
    """Names under which a custom resource is served."""

    plural: str
    singular: Optional[str] = None
    kind: str
    listKind: Optional[str] = None
    shortNames: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)


class CRDPrinterColumn(BaseModel):
    """Additional column shown by `kubectl get`."""

    name: str
    type: str
    jsonPath: str
    description: Optional[str] = None
    format: Optional[str] = None
    priority: Optional[int] = None


class CRDVersion(BaseModel):
    """A single served version of the CRD."""

    name: str
    served: bool = True
    storage: bool = False
    schema_: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    subresources: Optional[Dict[str, Any]] = None
    additionalPrinterColumns: List[CRDPrinterColumn] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        extra = "allow"


class CRDSpec(BaseModel):
    """Spec of a CustomResourceDefinition."""

    group: str
    names: CRDNames
    scope: str = "Namespaced"
    versions: List[CRDVersion] = Field(default_factory=list)

    class Config:
        extra = "allow"


class CRDStatus(BaseModel):
    """Status of a CustomResourceDefinition."""

    conditions: List[CRDCondition] = Field(default_factory=list)
    acceptedNames: Optional[CRDNames] = None
    storedVersions: List[str] = Field(default_factory=list)

    class Config:
        extra = "allow"


class CustomResourceDefinition(BaseModel):
    """The resource object handed around by reconcilers.

    Owned by the caller. Helpers in this package mutate it in place and never
    keep a reference to it.
    """

    apiVersion: str = "apiextensions.k8s.io/v1"
    kind: str = "CustomResourceDefinition"
    metadata: CRDMetadata
    spec: CRDSpec
    status: CRDStatus = Field(default_factory=CRDStatus)

    class Config:
        extra = "allow"

"""Errors reported by the CRD helpers."""


class CRDHelperError(Exception):
    """Base class for all errors in this package."""


class InvalidApprovalAnnotation(CRDHelperError, ValueError):
    """The approval annotation is neither a bypass marker nor a usable URL.

    Returned next to ``ApprovalState.API_APPROVAL_INVALID`` rather than
    raised, so callers can record it on a condition.
    """

    def __init__(self, value: str, problem: str):
        self.value = value
        self.problem = problem
        super().__init__(f"{problem}: {value!r}")


class VersionNotFound(CRDHelperError, KeyError):
    """The CRD does not declare the requested version."""

    def __init__(self, crd_name: str, version: str):
        self.crd_name = crd_name
        self.version = version
        super().__init__(f"version {version} not found in CustomResourceDefinition {crd_name}")

    def __str__(self):
        return self.args[0]


class NoStorageVersion(CRDHelperError):
    """No version of the CRD is marked as the storage version."""

    def __init__(self, crd_name: str):
        self.crd_name = crd_name
        super().__init__(f"invalid CustomResourceDefinition {crd_name}, no storage version")

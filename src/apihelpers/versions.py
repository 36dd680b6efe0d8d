"""Lookups over the versions declared by a CRD."""

from typing import Any, Dict, List, Optional

from apihelpers.crd.base import CRDPrinterColumn, CRDVersion, CustomResourceDefinition
from apihelpers.errors import NoStorageVersion, VersionNotFound

DEFAULT_AGE_COLUMN = CRDPrinterColumn(
    name="Age",
    type="date",
    jsonPath=".metadata.creationTimestamp",
)


def has_served_crd_version(crd: CustomResourceDefinition, version: str) -> bool:
    for v in crd.spec.versions:
        if v.name == version:
            return v.served
    return False


def get_crd_storage_version(crd: CustomResourceDefinition) -> str:
    """Return the name of the version persisted by the API server.

    Raises:
        NoStorageVersion: If no version has ``storage: true``
    """
    for v in crd.spec.versions:
        if v.storage:
            return v.name
    raise NoStorageVersion(crd.metadata.name)


def is_stored_version(crd: CustomResourceDefinition, version: str) -> bool:
    return version in crd.status.storedVersions


def _get_version(crd: CustomResourceDefinition, version: str) -> CRDVersion:
    for v in crd.spec.versions:
        if v.name == version:
            return v
    raise VersionNotFound(crd.metadata.name, version)


def get_schema_for_version(
    crd: CustomResourceDefinition, version: str
) -> Optional[Dict[str, Any]]:
    return _get_version(crd, version).schema_


def get_subresources_for_version(
    crd: CustomResourceDefinition, version: str
) -> Optional[Dict[str, Any]]:
    return _get_version(crd, version).subresources


def get_columns_for_version(
    crd: CustomResourceDefinition, version: str
) -> List[CRDPrinterColumn]:
    """Return the printer columns for a version, with the Age column appended.

    The Age column is only added when the version does not declare one of
    its own.
    """
    columns = list(_get_version(crd, version).additionalPrinterColumns)
    if not any(c.name == DEFAULT_AGE_COLUMN.name for c in columns):
        columns.append(DEFAULT_AGE_COLUMN.model_copy())
    return columns

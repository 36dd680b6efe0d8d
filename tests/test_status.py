"""Tests for converting between raw bodies and the CRD model."""

import copy

import pytest
from pydantic import ValidationError

from apihelpers.approval import KUBE_API_APPROVED_ANNOTATION, approval_condition
from apihelpers.conditions import (
    is_crd_condition_present_and_equal,
    is_crd_condition_true,
    remove_crd_condition,
    set_crd_condition,
)
from apihelpers.crd.base import ConditionStatus
from apihelpers.finalizers import crd_remove_finalizer
from apihelpers.status import conditions_patch, crd_from_body, finalizers_patch, format_time

from conftest import utc

BODY = {
    "apiVersion": "apiextensions.k8s.io/v1",
    "kind": "CustomResourceDefinition",
    "metadata": {
        "name": "widgets.sigs.k8s.io",
        "resourceVersion": "12",
        "uid": "0b6a6c1e",
        "annotations": {KUBE_API_APPROVED_ANNOTATION: "https://github.com/kubernetes/enhancements/pull/1111"},
        "finalizers": ["customresourcecleanup.apiextensions.k8s.io"],
    },
    "spec": {
        "group": "sigs.k8s.io",
        "names": {"plural": "widgets", "singular": "widget", "kind": "Widget", "listKind": "WidgetList"},
        "scope": "Namespaced",
        "versions": [
            {
                "name": "v1",
                "served": True,
                "storage": True,
                "schema": {"openAPIV3Schema": {"type": "object"}},
            }
        ],
    },
    "status": {
        "conditions": [
            {
                "type": "Established",
                "status": "True",
                "reason": "InitialNamesAccepted",
                "message": "the initial names have been accepted",
                "lastTransitionTime": "2019-06-01T00:00:00Z",
            }
        ],
        "storedVersions": ["v1"],
    },
}


def test_crd_from_body():
    crd = crd_from_body(BODY)

    assert crd.metadata.name == "widgets.sigs.k8s.io"
    assert crd.metadata.uid == "0b6a6c1e"
    assert crd.spec.versions[0].schema_ == {"openAPIV3Schema": {"type": "object"}}
    assert crd.status.conditions[0].status == ConditionStatus.TRUE
    assert crd.status.conditions[0].lastTransitionTime == utc(2019, 6, 1)
    assert is_crd_condition_true(crd, "Established")


def test_crd_from_body_rejects_missing_spec():
    with pytest.raises(ValidationError):
        crd_from_body({"metadata": {"name": "broken"}})


def test_remove_after_body_with_repeated_condition_type():
    body = copy.deepcopy(BODY)
    body["status"]["conditions"].append(dict(body["status"]["conditions"][0]))
    crd = crd_from_body(body)

    remove_crd_condition(crd, "Established")

    assert not is_crd_condition_present_and_equal(crd, "Established", ConditionStatus.TRUE)
    assert conditions_patch(crd) == []


def test_reconcile_round_trip(clock):
    crd = crd_from_body(BODY)

    set_crd_condition(crd, approval_condition(crd), clock=clock)
    crd_remove_finalizer(crd, "customresourcecleanup.apiextensions.k8s.io")

    assert conditions_patch(crd) == [
        {
            "type": "Established",
            "status": "True",
            "reason": "InitialNamesAccepted",
            "message": "the initial names have been accepted",
            "lastTransitionTime": "2019-06-01T00:00:00Z",
        },
        {
            "type": "KubernetesAPIApprovalPolicyConformant",
            "status": "True",
            "reason": "ApprovedAnnotation",
            "message": "approved in https://github.com/kubernetes/enhancements/pull/1111",
            "lastTransitionTime": "2019-06-01T00:00:00Z",
        },
    ]
    assert finalizers_patch(crd) == {"metadata": {"finalizers": []}}


def test_format_time_assumes_utc_for_naive_values():
    assert format_time(utc(2018, 1, 2).replace(tzinfo=None)) == "2018-01-02T00:00:00Z"

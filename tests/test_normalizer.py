#!/usr/bin/env python3
"""
CLUSTERFORGE NORMALIZER SUITE
-----------------------------
Namespace backfill rules: inject when missing, never overwrite, never
touch cluster-scoped resources, and stay byte-stable on repeat runs.
"""

import pytest
from ruamel.yaml import YAML

from clusterforge.core.exceptions import ParseError
from clusterforge.smelter.normalizer import NamespaceNormalizer

yaml_parser = YAML(typ='safe')

DEPLOYMENT = (
    "apiVersion: apps/v1\n"
    "kind: Deployment\n"
    "metadata:\n"
    "  name: web\n"
    "spec:\n"
    "  replicas: 1\n"
)


def test_injects_default_namespace_after_name():
    result = NamespaceNormalizer("prod").normalize(DEPLOYMENT)

    assert result.namespace_injected is True
    assert result.cluster_scoped is False
    assert result.identity.namespace == "prod"
    assert result.content == (
        "apiVersion: apps/v1\n"
        "kind: Deployment\n"
        "metadata:\n"
        "  name: web\n"
        "  namespace: prod\n"
        "spec:\n"
        "  replicas: 1\n"
    )


@pytest.mark.parametrize("default", ["prod", "staging", "default"])
def test_explicit_namespace_is_preserved(default):
    text = "apiVersion: v1\nkind: Service\nmetadata:\n  name: svc\n  namespace: team-a\n"
    result = NamespaceNormalizer(default).normalize(text)

    assert result.namespace_injected is False
    assert yaml_parser.load(result.content)["metadata"]["namespace"] == "team-a"


@pytest.mark.parametrize("value", ['""', "''", ""])
def test_empty_namespace_is_filled(value):
    text = f"apiVersion: v1\nkind: ConfigMap\nmetadata:\n  name: cfg\n  namespace: {value}\n"
    result = NamespaceNormalizer("prod").normalize(text)

    assert result.namespace_injected is True
    assert yaml_parser.load(result.content)["metadata"]["namespace"] == "prod"


@pytest.mark.parametrize("text", [
    "apiVersion: v1\nkind: Namespace\nmetadata:\n  name: prod\n",
    "apiVersion: rbac.authorization.k8s.io/v1\nkind: ClusterRole\nmetadata:\n  name: reader\nrules: []\n",
    "apiVersion: apiextensions.k8s.io/v1\nkind: CustomResourceDefinition\nmetadata:\n  name: widgets.example.com\n",
])
def test_cluster_scoped_never_gains_namespace(text):
    result = NamespaceNormalizer("prod").normalize(text)

    assert result.cluster_scoped is True
    assert result.namespace_injected is False
    assert "namespace" not in yaml_parser.load(result.content)["metadata"]


def test_cluster_scoped_existing_namespace_passes_through():
    text = "apiVersion: v1\nkind: PersistentVolume\nmetadata:\n  name: pv0\n  namespace: stray\n"
    result = NamespaceNormalizer("prod").normalize(text)
    assert yaml_parser.load(result.content)["metadata"]["namespace"] == "stray"


def test_other_metadata_survives_injection():
    text = (
        "apiVersion: v1\n"
        "kind: Secret\n"
        "metadata:\n"
        "  name: creds\n"
        "  labels:\n"
        "    app: web\n"
        "  annotations:\n"
        "    owner: platform\n"
        "  finalizers:\n"
        "    - example.com/cleanup\n"
        "type: Opaque\n"
    )
    result = NamespaceNormalizer("prod").normalize(text)
    metadata = yaml_parser.load(result.content)["metadata"]

    assert list(metadata) == ["name", "namespace", "labels", "annotations", "finalizers"]
    assert metadata["finalizers"] == ["example.com/cleanup"]
    assert result.identity.labels == {"app": "web"}
    assert result.identity.annotations == {"owner": "platform"}


def test_missing_metadata_is_created_after_kind():
    text = "apiVersion: v1\nkind: ConfigMap\ndata:\n  key: value\n"
    result = NamespaceNormalizer("prod").normalize(text)
    doc = yaml_parser.load(result.content)

    assert list(doc) == ["apiVersion", "kind", "metadata", "data"]
    assert doc["metadata"] == {"namespace": "prod"}


def test_normalize_is_idempotent():
    normalizer = NamespaceNormalizer("prod")
    text = (
        "apiVersion: apps/v1\n"
        "kind: Deployment\n"
        "metadata:\n"
        "  name: web\n"
        "spec:\n"
        "  template:\n"
        "    spec:\n"
        "      containers:\n"
        "        - name: web\n"
        "          image: nginx\n"
    )
    first = normalizer.normalize(text).content
    assert normalizer.normalize(text).content == first
    assert normalizer.normalize(first).content == first


@pytest.mark.parametrize("text", [
    "- a\n- b\n",
    "just a string\n",
    "kind: [Deployment]\nmetadata:\n  name: web\n",
    "kind: Pod\napiVersion: {group: v1}\n",
    "kind: Pod\nmetadata:\n  - name: web\n",
    "kind: Pod\nmetadata:\n  name: {a: b}\n",
    "kind: Pod\nmetadata:\n  name: web\n  labels: [a, b]\n",
    "kind: Pod\nmetadata:\n  name: web\n  annotations:\n    x:\n      a: b\n",
    "kind: Pod\nmetadata:\n  name: web\n  labels:\n    app: [web, api]\n",
    "kind: Pod\nmetadata:\n  name: ../escape\n",
    "kind: [unclosed\n",
])
def test_malformed_manifest_raises_parse_error(text):
    with pytest.raises(ParseError):
        NamespaceNormalizer("prod").normalize(text)

#!/usr/bin/env python3
"""
CLUSTERFORGE SCOPE TABLE
------------------------
Static classification of Kubernetes kinds into cluster-scoped and
namespace-scoped resources.

The table is keyed on (kind, API group) so that the version part of an
apiVersion ("v1", "v1beta1") never changes the answer. Anything not in
the table is namespace-scoped. Add new kinds here; the normalizer only
ever calls is_cluster_scoped().

Author: Cluster Forge Team
Date: 2026-10-16
"""

from typing import FrozenSet, Tuple

CORE_GROUP = ""

CLUSTER_SCOPED: FrozenSet[Tuple[str, str]] = frozenset({
    # core/v1
    ("Namespace", CORE_GROUP),
    ("Node", CORE_GROUP),
    ("PersistentVolume", CORE_GROUP),
    ("ComponentStatus", CORE_GROUP),
    # RBAC
    ("ClusterRole", "rbac.authorization.k8s.io"),
    ("ClusterRoleBinding", "rbac.authorization.k8s.io"),
    # Storage
    ("StorageClass", "storage.k8s.io"),
    ("CSIDriver", "storage.k8s.io"),
    ("CSINode", "storage.k8s.io"),
    ("VolumeAttachment", "storage.k8s.io"),
    # API machinery
    ("CustomResourceDefinition", "apiextensions.k8s.io"),
    ("APIService", "apiregistration.k8s.io"),
    ("MutatingWebhookConfiguration", "admissionregistration.k8s.io"),
    ("ValidatingWebhookConfiguration", "admissionregistration.k8s.io"),
    ("ValidatingAdmissionPolicy", "admissionregistration.k8s.io"),
    ("ValidatingAdmissionPolicyBinding", "admissionregistration.k8s.io"),
    ("FlowSchema", "flowcontrol.apiserver.k8s.io"),
    ("PriorityLevelConfiguration", "flowcontrol.apiserver.k8s.io"),
    # Scheduling, nodes, networking, policy
    ("PriorityClass", "scheduling.k8s.io"),
    ("RuntimeClass", "node.k8s.io"),
    ("IngressClass", "networking.k8s.io"),
    ("IPAddress", "networking.k8s.io"),
    ("ServiceCIDR", "networking.k8s.io"),
    ("PodSecurityPolicy", "policy"),
    ("CertificateSigningRequest", "certificates.k8s.io"),
    # Common ecosystem CRDs
    ("ClusterIssuer", "cert-manager.io"),
    ("ClusterPolicy", "kyverno.io"),
    ("ClusterSecretStore", "external-secrets.io"),
})


def api_group(api_version: str) -> str:
    """'apps/v1' -> 'apps', 'v1' -> '' (core group)."""
    group, sep, _ = api_version.strip().rpartition("/")
    return group if sep else CORE_GROUP


def is_cluster_scoped(kind: str, api_version: str) -> bool:
    """Pure lookup: True when (kind, group of api_version) is cluster-scoped."""
    return (kind, api_group(api_version)) in CLUSTER_SCOPED

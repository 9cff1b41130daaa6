import pytest

from clusterforge.core.scope import api_group, is_cluster_scoped


@pytest.mark.parametrize("api_version, group", [
    ("v1", ""),
    ("apps/v1", "apps"),
    ("rbac.authorization.k8s.io/v1", "rbac.authorization.k8s.io"),
    ("", ""),
])
def test_api_group(api_version, group):
    assert api_group(api_version) == group


@pytest.mark.parametrize("kind, api_version", [
    ("Namespace", "v1"),
    ("PersistentVolume", "v1"),
    ("ClusterRole", "rbac.authorization.k8s.io/v1"),
    ("ClusterRoleBinding", "rbac.authorization.k8s.io/v1beta1"),
    ("CustomResourceDefinition", "apiextensions.k8s.io/v1"),
    ("StorageClass", "storage.k8s.io/v1"),
    ("ValidatingWebhookConfiguration", "admissionregistration.k8s.io/v1"),
    ("ClusterIssuer", "cert-manager.io/v1"),
])
def test_cluster_scoped(kind, api_version):
    assert is_cluster_scoped(kind, api_version)


@pytest.mark.parametrize("kind, api_version", [
    ("Deployment", "apps/v1"),
    ("ConfigMap", "v1"),
    ("Role", "rbac.authorization.k8s.io/v1"),
    ("Issuer", "cert-manager.io/v1"),
    # Same kind name in another group is a different resource
    ("ClusterRole", "example.com/v1"),
    ("", ""),
])
def test_namespace_scoped(kind, api_version):
    assert not is_cluster_scoped(kind, api_version)

"""Cluster Forge - split, normalize and cast Kubernetes manifest bundles."""

__version__ = "1.0.0"

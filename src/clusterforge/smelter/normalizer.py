#!/usr/bin/env python3
"""
CLUSTERFORGE NORMALIZER - Namespace Backfill (Stage 3)
------------------------------------------------------
Reads a sanitized document twice over: once as a round-trip mapping so
nothing unknown is lost on the way back out, and once as a typed
ResourceIdentity for the fields the rules need.

Policy: every namespace-scoped resource ends up with a namespace. An
explicit namespace is never overwritten, and cluster-scoped resources
are never given one (an existing value passes through untouched).

Author: Cluster Forge Team
Date: 2026-10-16
"""

import logging
from dataclasses import dataclass
from typing import Callable, Tuple

from ruamel.yaml import YAMLError
from ruamel.yaml.comments import CommentedMap

from clusterforge.core.exceptions import ParseError
from clusterforge.core.models import ResourceIdentity
from clusterforge.core.scope import is_cluster_scoped
from clusterforge.core.yamlio import build_yaml, dump_document

logger = logging.getLogger("clusterforge.smelter")

# Characters that would let a kind or name escape the group directory
_UNSAFE_PATH_CHARS = ("/", "\\", "\0")


@dataclass
class NormalizedDocument:
    """Result of normalizing one document."""
    content: str
    identity: ResourceIdentity
    cluster_scoped: bool
    namespace_injected: bool = False


class NamespaceNormalizer:
    """
    Injects the default namespace into namespace-scoped manifests.
    The scope lookup is pluggable so new kinds never touch this class.
    """

    def __init__(self, default_namespace: str,
                 scope_lookup: Callable[[str, str], bool] = is_cluster_scoped):
        self.default_namespace = default_namespace
        self.scope_lookup = scope_lookup
        self.yaml = build_yaml()

    def parse(self, text: str) -> Tuple[CommentedMap, ResourceIdentity]:
        """
        Decodes text into the round-trip mapping plus its identity view.

        Raises:
            ParseError: if the text is not YAML, not a mapping, or has
                malformed identity fields.
        """
        try:
            doc = self.yaml.load(text)
        except YAMLError as e:
            raise ParseError(f"Unable to parse manifest: {e}") from e

        identity = ResourceIdentity.from_document(doc)
        for label, value in (("kind", identity.kind), ("metadata.name", identity.name)):
            if any(ch in value for ch in _UNSAFE_PATH_CHARS):
                raise ParseError(f"Field '{label}' contains a path separator: {value!r}")
        return doc, identity

    def normalize(self, text: str) -> NormalizedDocument:
        doc, identity = self.parse(text)
        cluster_scoped = self.scope_lookup(identity.kind, identity.api_version)

        injected = False
        if not cluster_scoped and not identity.namespace:
            self._inject_namespace(doc)
            identity.namespace = self.default_namespace
            injected = True
            logger.debug("Injected namespace '%s' into %s/%s",
                         self.default_namespace, identity.kind, identity.name)

        return NormalizedDocument(
            content=dump_document(doc, self.yaml),
            identity=identity,
            cluster_scoped=cluster_scoped,
            namespace_injected=injected,
        )

    def _inject_namespace(self, doc: CommentedMap):
        metadata = doc.get("metadata")
        if metadata is None:
            metadata = CommentedMap()
            # Keep the conventional apiVersion/kind/metadata ordering
            position = list(doc.keys()).index("kind") + 1 if "kind" in doc else 0
            if "metadata" in doc:
                doc["metadata"] = metadata
            else:
                doc.insert(position, "metadata", metadata)

        if "namespace" in metadata:
            metadata["namespace"] = self.default_namespace
            return

        keys = list(metadata.keys())
        position = keys.index("name") + 1 if "name" in keys else 0
        metadata.insert(position, "namespace", self.default_namespace)

#!/usr/bin/env python3
"""
CLUSTERFORGE CORE MODELS
------------------------
Defines the fundamental data structures shared by the smelter and caster.

ToolConfig is the caller-supplied configuration of one split run.
ResourceIdentity is the typed projection of a manifest: the handful of
fields the normalizer reasons about, read from the round-trip mapping
each time they are needed and never stored on their own.

Author: Cluster Forge Team
Date: 2026-10-16
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from clusterforge.core.exceptions import ParseError

# Scalar types a YAML loader may hand back for an identity field
_SCALARS = (str, int, float, bool, datetime.date)


@dataclass
class ToolConfig:
    """
    One tool (component) to smelt.

    filename is the multi-document bundle to split, name is the group used
    as the output subdirectory, and namespace is injected into namespaced
    resources that have none. An empty namespace falls back to the name.
    """
    filename: str
    name: str
    namespace: str = ""

    @property
    def default_namespace(self) -> str:
        return self.namespace or self.name


@dataclass
class ResourceIdentity:
    """
    Typed view of a manifest's identity fields.

    Unset string fields are empty strings; namespace stays None when the
    document has no usable namespace so callers can tell "absent" apart.
    """
    kind: str = ""
    api_version: str = ""
    name: str = ""
    namespace: Optional[str] = None
    labels: Dict[str, str] = field(default_factory=dict)
    annotations: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_document(cls, doc: Any) -> "ResourceIdentity":
        """
        Projects kind/apiVersion/metadata out of a parsed document.

        Raises:
            ParseError: if the document is not a mapping or any identity
                field has the wrong structural type.
        """
        if not isinstance(doc, dict):
            raise ParseError(
                f"Manifest must be a mapping, got {type(doc).__name__}."
            )

        metadata = doc.get("metadata")
        if metadata is None:
            metadata = {}
        elif not isinstance(metadata, dict):
            raise ParseError("Field 'metadata' must be a mapping.")

        namespace = _scalar(metadata.get("namespace"), "metadata.namespace")
        return cls(
            kind=_scalar(doc.get("kind"), "kind") or "",
            api_version=_scalar(doc.get("apiVersion"), "apiVersion") or "",
            name=_scalar(metadata.get("name"), "metadata.name") or "",
            namespace=namespace or None,
            labels=_string_map(metadata.get("labels"), "metadata.labels"),
            annotations=_string_map(metadata.get("annotations"), "metadata.annotations"),
        )

    @property
    def file_name(self) -> str:
        """Output file name: <Kind>_<name>.yaml"""
        return f"{self.kind}_{self.name}.yaml"


def _scalar(value: Any, path: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, _SCALARS):
        raise ParseError(f"Field '{path}' must be a scalar, got {type(value).__name__}.")
    return str(value)


def _string_map(value: Any, path: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(f"Field '{path}' must be a mapping.")
    return {str(k): _scalar(v, f"{path}.{k}") or "" for k, v in value.items()}

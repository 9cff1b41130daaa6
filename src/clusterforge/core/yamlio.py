#!/usr/bin/env python3
"""
CLUSTERFORGE YAML I/O - Canonical Round-Trip
--------------------------------------------
One place that decides how the forge reads and writes YAML. Every
document that leaves the smelter goes through dump_document(), so all
split output shares the same indentation and line width.

Author: Cluster Forge Team
Date: 2026-10-16
"""

import io
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq


def build_yaml(typ: str = "rt") -> YAML:
    """
    Returns a ruamel.yaml instance with the Kubernetes house style.
    """
    yaml = YAML(typ=typ)
    if typ == "rt":
        yaml.preserve_quotes = True
        # Standard K8s: 2 spaces, sequences indented 4 (offset 2)
        yaml.indent(mapping=2, sequence=4, offset=2)
        yaml.width = 4096
    return yaml


def strip_comments(node: Any) -> Any:
    """
    Rebuilds a loaded tree without any comment metadata.

    Key order and scalar styles survive; comments (full-line and
    end-of-line), anchors and flow styling do not.
    """
    if isinstance(node, dict):
        clean = CommentedMap()
        for key, value in node.items():
            clean[key] = strip_comments(value)
        return clean
    if isinstance(node, list):
        return CommentedSeq(strip_comments(item) for item in node)
    return node


def dump_document(doc: Any, yaml: YAML = None) -> str:
    """Serializes a single document (no leading '---') to a string."""
    stream = io.StringIO()
    (yaml or build_yaml()).dump(doc, stream)
    return stream.getvalue()

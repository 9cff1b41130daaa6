#!/usr/bin/env python3
"""
CLUSTERFORGE EMITTER - Group Writer (Stage 4)
---------------------------------------------
Writes normalized documents to <root>/<group>/<Kind>_<name>.yaml.

Two documents with the same kind and name in one batch land on the same
path; the later one wins. Each write is atomic so a crash never leaves
a half-written manifest behind.

Author: Cluster Forge Team
Date: 2026-10-16
"""

import logging
import os
from pathlib import Path

from clusterforge.core.exceptions import EmitError
from clusterforge.core.models import ResourceIdentity

logger = logging.getLogger("clusterforge.smelter")

DEFAULT_OUTPUT_ROOT = "working"


class FileEmitter:
    """Owns the output directory of one group."""

    def __init__(self, group: str, output_root: str = DEFAULT_OUTPUT_ROOT):
        self.group = group
        self.directory = Path(output_root) / group

    def ensure_directory(self) -> Path:
        """Creates the group directory if missing. Safe to call repeatedly."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise EmitError(f"Cannot create output directory {self.directory}: {e}") from e
        return self.directory

    def target_path(self, identity: ResourceIdentity) -> Path:
        return self.directory / identity.file_name

    def emit(self, identity: ResourceIdentity, content: str) -> Path:
        """Writes one document and returns the path it was written to."""
        self.ensure_directory()
        target = self.target_path(identity)
        if target.exists():
            logger.debug("Overwriting %s", target)
        self._atomic_write(target, content)
        logger.info("Wrote %s", target)
        return target

    def _atomic_write(self, target_path: Path, content: str):
        temp_file = target_path.with_name(target_path.name + ".tmp")
        try:
            temp_file.write_text(content, encoding="utf-8")
            os.replace(temp_file, target_path)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise EmitError(f"Write failed for {target_path}: {e}") from e

#!/usr/bin/env python3
"""
CLUSTERFORGE SMELTER PIPELINE - The Furnace
-------------------------------------------
Runs one tool's bundle through the four smelting stages in a strict,
single-threaded order:

1. Split      - decode the stream into canonical documents
2. Sanitize   - drop separators, comments and provenance lines
3. Normalize  - backfill namespaces on namespace-scoped resources
4. Emit       - write <root>/<group>/<Kind>_<name>.yaml

Any failure aborts the run at once and propagates to the caller. Files
written before the failure stay on disk.

Author: Cluster Forge Team
Date: 2026-10-16
"""

import logging
from pathlib import Path

from clusterforge.core.exceptions import DecodeError, ManifestIOError
from clusterforge.core.models import ToolConfig
from clusterforge.smelter.context import DocumentReport, SplitResult
from clusterforge.smelter.emitter import DEFAULT_OUTPUT_ROOT, FileEmitter
from clusterforge.smelter.normalizer import NamespaceNormalizer
from clusterforge.smelter.sanitizer import sanitize
from clusterforge.smelter.splitter import DocumentSplitter

logger = logging.getLogger("clusterforge.smelter")


class SplitPipeline:
    """
    The Orchestrator: one instance can smelt any number of tools, one
    at a time. No state is carried from one run to the next.
    """

    def __init__(self, output_root: str = DEFAULT_OUTPUT_ROOT, dry_run: bool = False):
        self.output_root = output_root
        self.dry_run = dry_run
        self.splitter = DocumentSplitter()

    def read_bundle(self, filename: str) -> str:
        """Reads the whole source bundle (BOM-aware)."""
        try:
            return Path(filename).read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise DecodeError(f"{filename} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ManifestIOError(f"Unable to read {filename}: {e}") from e

    def run(self, config: ToolConfig) -> SplitResult:
        logger.info("Smelting '%s' from %s", config.name, config.filename)
        raw_text = self.read_bundle(config.filename)
        return self.run_text(raw_text, config)

    def run_text(self, raw_text: str, config: ToolConfig) -> SplitResult:
        """Smelts already-loaded bundle text for the given tool config."""
        emitter = FileEmitter(config.name, self.output_root)
        normalizer = NamespaceNormalizer(config.default_namespace)
        result = SplitResult(config=config, output_dir=emitter.directory, dry_run=self.dry_run)

        documents = self.splitter.split(raw_text)
        if not self.dry_run:
            emitter.ensure_directory()

        for index, document in enumerate(documents):
            normalized = normalizer.normalize(sanitize(document))

            output_path = None
            if not self.dry_run:
                output_path = emitter.emit(normalized.identity, normalized.content)

            result.documents.append(DocumentReport(
                index=index,
                identity=normalized.identity,
                cluster_scoped=normalized.cluster_scoped,
                namespace_injected=normalized.namespace_injected,
                output_path=output_path,
            ))

        logger.info("Smelted %d document(s) for '%s' (%d namespace injection(s))",
                    len(result.documents), config.name, result.injected_count)
        return result


def split_yaml(config: ToolConfig, output_root: str = DEFAULT_OUTPUT_ROOT) -> SplitResult:
    """Splits config.filename into <output_root>/<config.name>/."""
    return SplitPipeline(output_root=output_root).run(config)

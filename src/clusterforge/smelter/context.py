#!/usr/bin/env python3
"""
CLUSTERFORGE SPLIT CONTEXT
--------------------------
Records what a split run did, document by document, so the CLI can
report it. Nothing here feeds back into processing: each document is
handled to completion before the next one starts.

Author: Cluster Forge Team
Date: 2026-10-16
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from clusterforge.core.models import ResourceIdentity, ToolConfig


@dataclass
class DocumentReport:
    index: int                             # Position among the retained documents
    identity: ResourceIdentity
    cluster_scoped: bool
    namespace_injected: bool
    output_path: Optional[Path] = None     # None on dry run


@dataclass
class SplitResult:
    """Outcome of splitting one tool's bundle."""
    config: ToolConfig
    output_dir: Path
    dry_run: bool = False
    documents: List[DocumentReport] = field(default_factory=list)

    @property
    def written_files(self) -> List[Path]:
        """Distinct output paths, in first-write order."""
        seen = []
        for report in self.documents:
            if report.output_path is not None and report.output_path not in seen:
                seen.append(report.output_path)
        return seen

    @property
    def injected_count(self) -> int:
        return sum(1 for d in self.documents if d.namespace_injected)

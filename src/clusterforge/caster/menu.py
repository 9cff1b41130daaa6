#!/usr/bin/env python3
"""
CLUSTERFORGE CASTER - Tool Selection
------------------------------------
Chooses which smelted tools go into a deployable image. Candidates are
every configured tool plus any group already present under the working
directory. The special choice 'all' expands to every configured tool.

Preparing a tool is not implemented yet: cast() only reports the names
it would prepare.

Author: Cluster Forge Team
Date: 2026-10-16
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from clusterforge.core.exceptions import SelectionError
from clusterforge.core.models import ToolConfig
from clusterforge.smelter.emitter import DEFAULT_OUTPUT_ROOT

logger = logging.getLogger("clusterforge.caster")

ALL_TOOLS = "all"


def discover_tools(configs: List[ToolConfig], working_root: str = DEFAULT_OUTPUT_ROOT) -> List[str]:
    """Menu options: 'all', configured tools, then previously smelted groups."""
    names = [ALL_TOOLS]
    for config in configs:
        if config.name not in names:
            names.append(config.name)

    root = Path(working_root)
    if root.is_dir():
        for entry in sorted(root.iterdir()):
            if entry.is_dir() and not entry.is_symlink() and entry.name not in names:
                names.append(entry.name)
    return names


def resolve_selection(selected: Iterable[str], configs: List[ToolConfig],
                      available: Optional[List[str]] = None) -> List[str]:
    """
    Expands 'all' and removes it, keeping order and dropping repeats.

    Raises:
        SelectionError: if nothing was chosen, or a name is not in
            `available` (when given).
    """
    chosen = [name.strip() for name in selected if name and name.strip()]
    if not chosen:
        raise SelectionError("at least one tool is required")

    if available is not None:
        unknown = [name for name in chosen if name not in available]
        if unknown:
            raise SelectionError(f"unknown tool(s): {', '.join(unknown)}")

    if ALL_TOOLS in chosen:
        chosen.extend(config.name for config in configs)

    resolved = []
    for name in chosen:
        if name != ALL_TOOLS and name not in resolved:
            resolved.append(name)
    return resolved


def cast(configs: List[ToolConfig], selected: Iterable[str],
         prepare: Optional[Callable[[str], None]] = None,
         available: Optional[List[str]] = None) -> List[str]:
    """Resolves the selection and prepares each tool in order."""
    logger.info("starting up the menu...")
    tools = resolve_selection(selected, configs, available)
    for tool in tools:
        logger.info("Preparing %s", tool)
        if prepare is not None:
            prepare(tool)
    return tools

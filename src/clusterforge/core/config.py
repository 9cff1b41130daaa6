#!/usr/bin/env python3
"""
CLUSTERFORGE CONFIG LOADER
--------------------------
Loads the list of tools the forge knows about. The file is plain YAML,
either a top-level list or a mapping with a 'tools' list:

    - name: argo-cd
      filename: input/argo-cd/install.yaml
      namespace: argocd

Author: Cluster Forge Team
Date: 2026-10-16
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Optional

from ruamel.yaml import YAMLError

from clusterforge.core.exceptions import ConfigurationError
from clusterforge.core.models import ToolConfig
from clusterforge.core.yamlio import build_yaml

logger = logging.getLogger("clusterforge.config")

DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_ENV_VAR = "CLUSTERFORGE_CONFIG"


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    """--config flag, then $CLUSTERFORGE_CONFIG, then ./config.yaml"""
    return Path(explicit or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def load_configs(config_path: Optional[str] = None) -> List[ToolConfig]:
    """
    Reads and validates the tool list.

    Raises:
        ConfigurationError: if the file is missing, unparsable, or any
            entry lacks a name/filename or repeats a name.
    """
    path = resolve_config_path(config_path)
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        data = build_yaml("safe").load(path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Unable to read {path}: {e}") from e
    except YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    configs = parse_configs(data, source=str(path))
    logger.debug("Loaded %d tool(s) from %s", len(configs), path)
    return configs


def parse_configs(data: Any, source: str = "<config>") -> List[ToolConfig]:
    """Validates already-loaded config data into ToolConfig entries."""
    if data is None:
        return []
    if isinstance(data, dict):
        if "tools" not in data:
            raise ConfigurationError(f"{source}: expected a list of tools or a 'tools' key.")
        data = data["tools"] or []
    if not isinstance(data, list):
        raise ConfigurationError(f"{source}: tools must be a list.")

    configs = []
    seen = set()
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"{source}: entry {i} must be a mapping.")

        values = {}
        for key in ("name", "filename", "namespace"):
            value = entry.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{source}: entry {i} field '{key}' must be a string.")
            values[key] = value or ""

        for key in ("name", "filename"):
            if not values[key]:
                raise ConfigurationError(f"{source}: entry {i} is missing '{key}'.")
        if values["name"] in seen:
            raise ConfigurationError(f"{source}: duplicate tool name '{values['name']}'.")
        seen.add(values["name"])

        configs.append(ToolConfig(**values))
    return configs

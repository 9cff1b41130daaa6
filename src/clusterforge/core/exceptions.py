#!/usr/bin/env python3
"""
CLUSTERFORGE EXCEPTIONS
-----------------------
Every failure the forge can raise derives from ForgeError so the CLI has
a single place to catch, report and exit. Nothing below the CLI recovers
from these: the first error aborts the whole run.

Author: Cluster Forge Team
Date: 2026-10-16
"""


class ForgeError(Exception):
    """Base class for all Cluster Forge failures."""


class DecodeError(ForgeError):
    """The input stream is not valid YAML at the document-splitting stage."""


class ParseError(ForgeError):
    """A sanitized document cannot be interpreted as a Kubernetes manifest."""


class ManifestIOError(ForgeError, OSError):
    """Filesystem failure while reading a bundle or writing split output."""


class EmitError(ManifestIOError):
    """Directory creation or file write failed in the emitter."""


class ConfigurationError(ForgeError):
    """The tool configuration file is missing or malformed."""


class SelectionError(ForgeError):
    """The caster received an empty or unknown tool selection."""

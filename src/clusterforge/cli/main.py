#!/usr/bin/env python3
"""
CLUSTERFORGE CLI
----------------
Primary interface. Two subcommands:

1. smelt - split each tool's bundle into per-resource manifests
2. cast  - choose which smelted tools to prepare for packaging

Author: Cluster Forge Team
Date: 2026-10-16
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler

from clusterforge import __version__
from clusterforge.caster.menu import cast, discover_tools
from clusterforge.cli.formatter import ForgeFormatter, console
from clusterforge.core.config import load_configs
from clusterforge.core.exceptions import ConfigurationError, ForgeError
from clusterforge.core.models import ToolConfig
from clusterforge.smelter.emitter import DEFAULT_OUTPUT_ROOT
from clusterforge.smelter.pipeline import SplitPipeline

logger = logging.getLogger("clusterforge.cli")


def setup_logging(verbose: bool = False):
    """Routes all clusterforge loggers through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


class ForgeCLI:
    """
    CLI wrapper that translates user commands into smelter and caster
    actions and renders the results.
    """

    def __init__(self):
        self.formatter = ForgeFormatter()
        self.parser = argparse.ArgumentParser(
            prog="clusterforge",
            description="Cluster Forge - split, normalize and cast Kubernetes manifests",
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("--version", action="version", version=f"clusterforge v{__version__}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        smelt_parser = subparsers.add_parser("smelt", help="Split bundles into per-resource manifests")
        smelt_parser.add_argument("--config", help="Tool config file (default: $CLUSTERFORGE_CONFIG or config.yaml)")
        smelt_parser.add_argument("--tool", action="append", default=[], metavar="NAME",
                                  help="Only smelt this configured tool (repeatable)")
        smelt_parser.add_argument("--file", help="Smelt a single bundle instead of the config file")
        smelt_parser.add_argument("--name", help="Group name for --file")
        smelt_parser.add_argument("--namespace", default="", help="Default namespace for --file (default: the name)")
        smelt_parser.add_argument("--output-root", default=DEFAULT_OUTPUT_ROOT,
                                  help=f"Output root directory (default: {DEFAULT_OUTPUT_ROOT})")
        smelt_parser.add_argument("--dry-run", action="store_true", help="Preview results without writing")

        cast_parser = subparsers.add_parser("cast", help="Choose target tools to set up")
        cast_parser.add_argument("--config", help="Tool config file (default: $CLUSTERFORGE_CONFIG or config.yaml)")
        cast_parser.add_argument("--tools", nargs="+", metavar="NAME",
                                 help="Tools to prepare ('all' for every configured tool); prompts when omitted")
        cast_parser.add_argument("--working-root", default=DEFAULT_OUTPUT_ROOT,
                                 help="Where previously smelted groups live")

    def _smelt_targets(self, args: argparse.Namespace) -> List[ToolConfig]:
        if args.file:
            if not args.name:
                raise ConfigurationError("--name is required with --file")
            return [ToolConfig(filename=args.file, name=args.name, namespace=args.namespace)]

        configs = load_configs(args.config)
        if not args.tool:
            return configs
        known = {config.name for config in configs}
        unknown = [name for name in args.tool if name not in known]
        if unknown:
            raise ConfigurationError(f"Unknown tool(s): {', '.join(unknown)}")
        return [config for config in configs if config.name in args.tool]

    def _run_smelt(self, args: argparse.Namespace):
        self.formatter.print_header("Smelter", __version__)
        pipeline = SplitPipeline(output_root=args.output_root, dry_run=args.dry_run)
        for config in self._smelt_targets(args):
            result = pipeline.run(config)
            self.formatter.print_split_report(result)

    def _run_cast(self, args: argparse.Namespace):
        self.formatter.print_header("Caster", __version__)
        configs = load_configs(args.config)
        options = discover_tools(configs, args.working_root)

        selected = args.tools
        if not selected:
            console.print("[bold]Choose your target tools to set up[/bold]")
            for option in options:
                console.print(f"  • {option}")
            answer = console.input("[bold yellow]Tools (comma separated): [/bold yellow]")
            selected = answer.split(",")

        with console.status("Preparing your tools..."):
            tools = cast(configs, selected, prepare=console.print, available=options)
        self.formatter.print_cast_summary(tools)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        setup_logging(args.verbose)

        if args.command is None:
            self.parser.print_help()
            return 0

        try:
            if args.command == "smelt":
                self._run_smelt(args)
            elif args.command == "cast":
                self._run_cast(args)
        except ForgeError as e:
            logger.debug("Aborted", exc_info=True)
            self.formatter.print_error(str(e))
            return 1
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(ForgeCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()

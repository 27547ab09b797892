"""``settings`` subcommand."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from ..config.settings import config_path, default_settings, load_settings, save_settings


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``settings`` subcommand."""

    parser = sub.add_parser(
        "settings",
        help="Create or show the settings file",
        description="Write default settings or print the effective settings as YAML.",
    )
    parser.add_argument("--config", help="Settings YAML file (default: NATALWHEEL_HOME/config.yaml)")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--init", action="store_true", help="Write default settings")
    group.add_argument("--show", action="store_true", help="Print the effective settings")
    parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing file with --init"
    )
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    """Execute the settings subcommand."""

    target = Path(args.config) if args.config else config_path()
    if args.init:
        if target.exists() and not args.force:
            print(f"{target} already exists (use --force to overwrite)", file=sys.stderr)
            return 2
        save_settings(default_settings(), target)
        print(f"wrote default settings to {target}")
        return 0
    try:
        settings = load_settings(target)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"failed to load settings: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(yaml.safe_dump(settings.model_dump(), sort_keys=False, allow_unicode=True))
    return 0

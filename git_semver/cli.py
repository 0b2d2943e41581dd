"""Print the semantic version of the current git checkout."""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from git_semver import __version__
from git_semver.config import ResolverConfig
from git_semver.errors import VersionResolveError
from git_semver.git import describe_repository
from git_semver.resolver import resolve

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="git-semver", description=__doc__)
    parser.add_argument(
        "-C",
        dest="repo_dir",
        metavar="DIR",
        help="Run git in DIR instead of the current directory.",
    )
    parser.add_argument("--tag", help="Use this tag instead of asking git.")
    parser.add_argument(
        "--describe",
        help="Use this 'git describe --tags --long --dirty' output instead of asking git.",
    )
    parser.add_argument(
        "--no-tag",
        action="store_true",
        help="Resolve as if the repository had no tags.",
    )
    parser.add_argument(
        "--no-dirty",
        dest="show_dirty",
        action="store_false",
        default=None,
        help="Ignore uncommitted changes.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Log nothing, not even errors.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> ResolverConfig:
    try:
        config = ResolverConfig.from_env()
    except ValueError as e:
        parser.error(str(e))

    overrides = {}
    if args.repo_dir is not None:
        overrides["repo_dir"] = args.repo_dir
    if args.show_dirty is not None:
        overrides["show_dirty"] = args.show_dirty
    if args.verbose:
        overrides["log_level"] = logging.DEBUG
    elif args.quiet:
        overrides["log_level"] = logging.CRITICAL + 1
    return dataclasses.replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.tag is None) != (args.describe is None):
        parser.error("--tag and --describe must be given together")
    if args.no_tag and args.tag is not None:
        parser.error("--no-tag cannot be combined with --tag/--describe")

    config = _load_config(parser, args)
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.no_tag:
            tag, describe, tag_available = "", "", False
        elif args.tag is not None:
            tag, describe, tag_available = args.tag, args.describe, True
        else:
            tag, describe, tag_available = describe_repository(config)
        version = resolve(tag, describe, tag_available, show_dirty=config.show_dirty)
    except VersionResolveError as e:
        logger.error("Exiting: %s", e)
        return e.exit_code

    print(version)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""git_semver: semantic versions from git tags.

Reads the most recent tag and ``git describe --tags --long --dirty`` output
and turns them into a single semver string for build tooling.

Modules:
    resolver: ParsedVersion, parse, format_version, resolve
    git: Running git and classifying its failures
    config: ResolverConfig and GIT_SEMVER_* environment overrides
    errors: Exception hierarchy
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from git_semver._version import __version__  # noqa: E402
from git_semver.errors import (  # noqa: E402
    GitCommandError,
    GitError,
    InvalidDescribeFormat,
    MalformedVersionCore,
    NotAGitRepository,
    VersionResolveError,
)
from git_semver.resolver import ParsedVersion, format_version, parse, resolve  # noqa: E402

__all__ = [
    "__version__",
    "ParsedVersion",
    "parse",
    "format_version",
    "resolve",
    "VersionResolveError",
    "InvalidDescribeFormat",
    "MalformedVersionCore",
    "GitError",
    "NotAGitRepository",
    "GitCommandError",
]

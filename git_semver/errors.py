"""Exceptions raised while deriving a version from git."""

from typing import Optional, Sequence


class VersionResolveError(Exception):
    """Base class for every failure that prevents a version from being printed."""

    exit_code = 1


class InvalidDescribeFormat(VersionResolveError, ValueError):
    """The commit count in a ``git describe --long`` string is not a non-negative integer."""

    exit_code = 3

    def __init__(self, describe: str, token: str):
        self.describe = describe
        self.token = token
        super().__init__(
            f"Cannot read commits ahead from describe output {describe!r}: "
            f"{token!r} is not a non-negative integer"
        )


class MalformedVersionCore(VersionResolveError, ValueError):
    """The numeric core of a tag is not ``<major>.<minor>.<patch>``."""

    exit_code = 4

    def __init__(self, version: str, reason: str):
        self.version = version
        self.reason = reason
        super().__init__(f"Malformed version core {version!r}: {reason}")


class GitError(VersionResolveError):
    """Running git failed in a way that is not 'no tags yet'."""


class NotAGitRepository(GitError):
    exit_code = 1

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a git repository: {path}")


class GitCommandError(GitError):
    exit_code = 2

    def __init__(self, command: Sequence[str], returncode: Optional[int], stderr: str):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"Command {' '.join(self.command)!r} failed "
            f"(exit code {returncode}): {stderr.strip()}"
        )

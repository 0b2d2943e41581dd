"""Query git for the tag and describe strings the resolver consumes."""

import logging
import subprocess
from typing import NamedTuple, Optional, Sequence

from git_semver.config import ResolverConfig
from git_semver.errors import GitCommandError, NotAGitRepository

logger = logging.getLogger(__name__)

NOT_A_REPOSITORY = "fatal: not a git repository"
NO_NAMES_FOUND = "fatal: No names found"

TAG_ARGS = ("describe", "--tags", "--abbrev=0")
DESCRIBE_ARGS = ("describe", "--tags", "--long", "--dirty")


class RawInputs(NamedTuple):
    tag: str
    describe: str
    tag_available: bool


def run_git(
    args: Sequence[str],
    cwd: Optional[str] = None,
    git_executable: str = "git",
) -> Optional[str]:
    """
    Run a git command and return its stripped stdout.

    Args:
        args: Arguments after the executable, e.g. ``("describe", "--tags")``.
        cwd: Working directory; defaults to the current one.
        git_executable: Name or path of the git binary.

    Returns:
        The output, or None when git reports that no tag names exist
        (a fresh repository, or one without commits).

    Raises:
        NotAGitRepository: ``cwd`` is not inside a work tree.
        GitCommandError: git is missing or failed for any other reason.
    """
    command = [git_executable, *args]
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            cwd=cwd,
        )
    except OSError as e:
        raise GitCommandError(command, None, str(e)) from e

    if result.returncode != 0:
        stderr = result.stderr
        if stderr.startswith(NOT_A_REPOSITORY):
            raise NotAGitRepository(cwd or ".")
        if stderr.startswith(NO_NAMES_FOUND):
            logger.info("git found no tags: %s", stderr.strip())
            return None
        raise GitCommandError(command, result.returncode, stderr)

    return result.stdout.strip()


def describe_repository(config: Optional[ResolverConfig] = None) -> RawInputs:
    """Read the latest tag and the long describe string for ``config.repo_dir``."""
    config = config or ResolverConfig()
    tag = run_git(TAG_ARGS, cwd=config.repo_dir, git_executable=config.git_executable)
    describe = run_git(
        DESCRIBE_ARGS, cwd=config.repo_dir, git_executable=config.git_executable
    )

    if tag is None or describe is None:
        return RawInputs(tag="", describe="", tag_available=False)

    logger.debug("git describe: tag=%r describe=%r", tag, describe)
    return RawInputs(tag=tag, describe=describe, tag_available=True)

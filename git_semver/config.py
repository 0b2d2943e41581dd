"""Runtime settings for the git-semver command."""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

ENV_PREFIX = "GIT_SEMVER_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env(environ: Mapping[str, str], key: str, default: Optional[str] = None) -> Optional[str]:
    value = environ.get(ENV_PREFIX + key)
    return value if value and value.strip() else default


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{key} must be a boolean, got {value!r}")


def _parse_level(value: str) -> int:
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {value!r}")
    return level


@dataclass(frozen=True)
class ResolverConfig:
    """
    Settings for one run of the resolver.

    Attributes:
        repo_dir: Directory git is run in.
        git_executable: git binary name or path.
        show_dirty: When False, uncommitted changes never show in the version.
        log_level: Threshold for messages written to stderr.
    """

    repo_dir: str = field(default_factory=os.getcwd)
    git_executable: str = "git"
    show_dirty: bool = True
    log_level: int = logging.ERROR

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolverConfig":
        """Build a config from ``GIT_SEMVER_*`` variables; blank values keep defaults."""
        environ = os.environ if environ is None else environ
        kwargs = {}

        repo_dir = _env(environ, "REPO_DIR")
        if repo_dir is not None:
            kwargs["repo_dir"] = repo_dir
        git_executable = _env(environ, "GIT")
        if git_executable is not None:
            kwargs["git_executable"] = git_executable
        show_dirty = _env(environ, "SHOW_DIRTY")
        if show_dirty is not None:
            kwargs["show_dirty"] = _parse_bool("SHOW_DIRTY", show_dirty)
        log_level = _env(environ, "LOG_LEVEL")
        if log_level is not None:
            kwargs["log_level"] = _parse_level(log_level)

        return cls(**kwargs)

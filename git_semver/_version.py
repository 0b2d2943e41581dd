"""Derive this package's own version from package metadata or git."""

import os


def _get_version() -> str:
    """Return the installed version string.

    Resolution order:

    1. ``importlib.metadata`` — fast, no subprocess; works for installed
       packages and in environments without git (Docker, CI tarballs).
    2. This package's own resolver run against the source checkout, so a
       development tree reports e.g. ``v0.1.1-dev.3``.
    3. ``"unknown"`` — last resort.
    """
    try:
        from importlib.metadata import version

        return version("git_semver")
    except Exception:
        pass

    try:
        from git_semver.config import ResolverConfig
        from git_semver.git import describe_repository
        from git_semver.resolver import resolve

        repo_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        return resolve(*describe_repository(ResolverConfig(repo_dir=repo_dir)))
    except Exception:
        return "unknown"


__version__: str = _get_version()

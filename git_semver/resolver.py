"""Turn a git tag and its ``git describe --long --dirty`` output into a semver string.

The resolver is pure: it never runs git and keeps no state between calls.
:func:`parse` builds an immutable :class:`ParsedVersion`, and
:func:`format_version` renders it back to text.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Tuple

from git_semver.errors import InvalidDescribeFormat, MalformedVersionCore

logger = logging.getLogger(__name__)

FALLBACK_TAG = "v0.0.0"
TAG_PREFIX = "v"
DIRTY_MARKER = "dirty"
DEV_PRERELEASE = "dev"


@dataclass(frozen=True)
class ParsedVersion:
    """Structured version read from a tag plus describe output."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build_meta: str = ""
    has_prefix: bool = False
    commits_ahead: int = 0
    dirty: bool = False

    def __post_init__(self):
        for name in ("major", "minor", "patch", "commits_ahead"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")


def _is_non_negative_int(token: str) -> bool:
    return token.isascii() and token.isdigit()


def _split_core(version: str) -> Tuple[int, int, int]:
    """Split ``1.2.3`` into integers, raising MalformedVersionCore otherwise."""
    parts = version.split(".")
    if len(parts) != 3:
        raise MalformedVersionCore(
            version, f"expected major.minor.patch, got {len(parts)} part(s)"
        )
    for name, part in zip(("major", "minor", "patch"), parts):
        if not _is_non_negative_int(part):
            raise MalformedVersionCore(
                version, f"{name} {part!r} is not a non-negative integer"
            )
    major, minor, patch = (int(part) for part in parts)
    return major, minor, patch


def _check_suffix(tag: str, name: str, suffix: str) -> None:
    if suffix[:1] in ("+", "-"):
        raise MalformedVersionCore(tag, f"{name} {suffix!r} starts with a delimiter")


def parse(tag: str, describe: str, tag_available: bool = True) -> ParsedVersion:
    """
    Parse the raw git outputs into a :class:`ParsedVersion`.

    Args:
        tag (str): Most recent reachable tag, e.g. ``v1.2.3-beta.1``.
        describe (str): ``git describe --tags --long --dirty`` output, e.g.
            ``v1.2.3-beta.1-4-g1a2b3c4-dirty``.
        tag_available (bool): False when git found no tag or no commit. Both
            strings are then ignored and ``v0.0.0`` on a dirty tree is assumed.

    Returns:
        ParsedVersion: The parsed fields.

    Raises:
        InvalidDescribeFormat: The commit count after the tag is not numeric.
        MalformedVersionCore: The tag's core is not three non-negative integers,
            or its prerelease or build metadata starts with ``+`` or ``-``.

    Note:
        A tag without the ``v`` prefix resolves to a ``0.0.0`` core; its
        numbers are not read.
    """
    if not tag_available:
        logger.warning(
            "No tags or commits found, probably a new repository; using %s",
            FALLBACK_TAG,
        )
        tag = FALLBACK_TAG
        has_prefix = True
        dirty = True
        commits_ahead = 0
    else:
        # The describe output is "<tag>-<count>-g<hash>[-dirty]"
        describe_parts = describe[len(tag) + 1:].split("-")
        logger.debug("Found tag %r, describe parts %s", tag, describe_parts)
        if not _is_non_negative_int(describe_parts[0]):
            raise InvalidDescribeFormat(describe, describe_parts[0])
        commits_ahead = int(describe_parts[0])
        dirty = len(describe_parts) > 2
        has_prefix = False

    version = ""
    if tag.startswith(TAG_PREFIX):
        version = tag[len(TAG_PREFIX):]
        has_prefix = True

    build_meta = ""
    if "+" in version:
        version, build_meta = version.split("+", 1)
        _check_suffix(tag, "build metadata", build_meta)

    prerelease = ""
    if "-" in version:
        version, prerelease = version.split("-", 1)
        _check_suffix(tag, "prerelease", prerelease)

    major = minor = patch = 0
    if version:
        major, minor, patch = _split_core(version)

    return ParsedVersion(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build_meta=build_meta,
        has_prefix=has_prefix,
        commits_ahead=commits_ahead,
        dirty=dirty,
    )


def format_version(parsed: ParsedVersion) -> str:
    """
    Render a :class:`ParsedVersion` as a semver string.

    Examples:
        v1.2.3, 0 ahead, clean          → v1.2.3
        v1.2.3, 5 ahead, clean          → v1.2.4-dev.5
        v1.2.3, 0 ahead, dirty          → v1.2.4+dirty
        v2.0.0-beta.1, 3 ahead, clean   → v2.0.0-beta.1.3
        v1.0.0+build77, 2 ahead, dirty  → v1.0.1-dev.2+build77.dirty
    """
    text = TAG_PREFIX if parsed.has_prefix else ""
    text += f"{parsed.major}.{parsed.minor}."

    # Untagged work without a prerelease is a preview of the next patch
    patch = parsed.patch
    if (parsed.commits_ahead > 0 or parsed.dirty) and not parsed.prerelease:
        patch += 1
    text += str(patch)

    if parsed.prerelease or parsed.commits_ahead != 0:
        text += "-"
        if not parsed.prerelease:
            text += f"{DEV_PRERELEASE}.{parsed.commits_ahead}"
        elif parsed.commits_ahead == 0:
            text += parsed.prerelease
        else:
            text += f"{parsed.prerelease}.{parsed.commits_ahead}"

    if parsed.build_meta or parsed.dirty:
        text += "+" + parsed.build_meta
        if parsed.dirty:
            text += ("." if parsed.build_meta else "") + DIRTY_MARKER

    return text


def resolve(
    tag: str,
    describe: str,
    tag_available: bool = True,
    show_dirty: bool = True,
) -> str:
    """Parse and format in one step.

    With ``show_dirty=False`` the working-tree state is dropped before
    formatting, so it affects neither the patch number nor the build metadata.
    """
    parsed = parse(tag, describe, tag_available)
    if not show_dirty and parsed.dirty:
        parsed = dataclasses.replace(parsed, dirty=False)

    version = format_version(parsed)
    logger.debug(
        "Set version to %s from describe %r (%s)",
        version,
        describe,
        ", ".join(f"{k}={v!r}" for k, v in dataclasses.asdict(parsed).items()),
    )
    return version

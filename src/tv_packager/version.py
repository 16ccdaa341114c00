"""Version string conversion between semantic versions and platform formats."""

from __future__ import annotations

import re

from tv_packager.errors import MetadataValidationError

MINOR_WIDTH = 2

_ORSAY_VERSION = re.compile(r"[0-9]+\.[0-9]+")
_WEBOS_VERSION = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _last_digits(component: str, width: int) -> str:
    padded = "0" * 6 + component
    return padded[-width:]


def to_orsay_version(semver: str) -> str:
    """Convert ``major.minor.patch`` into Orsay's ``major.MMRR`` format.

    Parameters
    ----------
    semver : str
        Three-component semantic version, e.g. ``"1.2.3"``.

    Returns
    -------
    str
        Formatted version, e.g. ``"1.0203"``. Non-numeric input is not
        rejected; the result must be checked with :func:`is_orsay_version`.

    Notes
    -----
    The revision is padded and truncated with the minor width (2 digits),
    not a 3-digit revision width.
    """
    parts = semver.split(".")
    parts += [""] * (3 - len(parts))
    major, minor, revision = parts[0], parts[1], parts[2]
    return f"{major}.{_last_digits(minor, MINOR_WIDTH)}{_last_digits(revision, MINOR_WIDTH)}"


def _parse_leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def next_revision(semver: str) -> str:
    """Return ``semver`` with its patch component incremented by one.

    A non-numeric or missing patch counts as ``0``.

    Raises
    ------
    MetadataValidationError
        If the major or minor component is not numeric.
    """
    parts = semver.split(".")
    parts += [""] * (3 - len(parts))
    major = _parse_leading_int(parts[0])
    minor = _parse_leading_int(parts[1])
    if major is None or minor is None:
        raise MetadataValidationError(f"Cannot derive next version from '{semver}'.")
    revision = (_parse_leading_int(parts[2]) or 0) + 1
    return f"{major}.{minor}.{revision}"


def is_orsay_version(text: str) -> bool:
    """Return ``True`` if ``text`` matches ``^\\d+\\.\\d+$``."""
    return _ORSAY_VERSION.fullmatch(text) is not None


def is_webos_version(text: str) -> bool:
    """Return ``True`` if ``text`` has exactly three all-digit components."""
    return _WEBOS_VERSION.fullmatch(text) is not None

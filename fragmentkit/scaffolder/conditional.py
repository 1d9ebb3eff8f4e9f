"""Conditional file names.

A fragment file name may carry a flag prefix::

    %(<flag>-<flag>-...)%<final name>

Flags are package-manager identifiers plus the channel tokens ``stable``,
``alpha`` and ``mobile``.  Example: ``%(pnpm-npm-yarn-stable-alpha)%package.json``
is emitted as ``package.json`` for pnpm, npm and yarn on the stable and alpha
channels, and skipped otherwise.

``resolve_file_name`` is a pure function so the grammar can be tested without
touching the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass

from .assets import MANIFEST_MARKER
from .package_manager import PackageManager


CHANNEL_FLAGS: frozenset[str] = frozenset({"stable", "alpha", "mobile"})

# Names that are renamed (or suppressed, for ``None``) when emitted verbatim.
RENAMED_FILES: dict[str, str | None] = {
    "_gitignore": ".gitignore",
    "_Cargo.toml": "Cargo.toml",
    MANIFEST_MARKER: None,
}

_PREFIX = "%("
_SEPARATOR = ")%"


@dataclass(frozen=True)
class RenderContext:
    """The axes a conditional file is evaluated against."""

    pkg_manager: PackageManager
    alpha: bool = False
    mobile: bool = False


@dataclass(frozen=True)
class FileDecision:
    """Outcome of resolving a single file name."""

    include: bool
    final_name: str = ""


SKIP = FileDecision(include=False)


def is_conditional(file_name: str) -> bool:
    return file_name.startswith(_PREFIX) and _SEPARATOR in file_name[1:]


def split_conditional(file_name: str) -> tuple[list[str], str]:
    """Split ``%(a-b)%name`` into ``(["a", "b"], "name")``."""
    flags_part, _, name = file_name[len(_PREFIX):].partition(_SEPARATOR)
    return flags_part.split("-"), name


def channel_eligible(flags: list[str], alpha: bool, mobile: bool) -> bool:
    """Whether the channel tokens in *flags* admit the current channel.

    ``mobile`` is only reachable on the alpha channel.
    """
    for_stable = "stable" in flags
    for_alpha = "alpha" in flags
    for_mobile = "mobile" in flags
    return (
        (for_stable and not alpha)
        or (for_alpha and alpha and not mobile)
        or (for_mobile and alpha and mobile)
        or not (for_stable or for_alpha or for_mobile)
    )


def manager_eligible(flags: list[str], pkg_manager: PackageManager) -> bool:
    managers = [flag for flag in flags if flag not in CHANNEL_FLAGS]
    return not managers or pkg_manager.value in managers


def resolve_file_name(file_name: str, context: RenderContext) -> FileDecision:
    """Decide whether *file_name* is emitted and under which name.

    Args:
        file_name: Last path component of a fragment entry.
        context: Package manager and channel flags of the current render.

    Returns:
        A ``FileDecision``; ``include`` is ``False`` for skipped files and for
        manifest markers, which never reach the output tree.
    """
    if file_name in RENAMED_FILES:
        renamed = RENAMED_FILES[file_name]
        return SKIP if renamed is None else FileDecision(True, renamed)

    if not is_conditional(file_name):
        return FileDecision(True, file_name)

    flags, name = split_conditional(file_name)
    if not (
        channel_eligible(flags, context.alpha, context.mobile)
        and manager_eligible(flags, context.pkg_manager)
    ):
        return SKIP

    if name == MANIFEST_MARKER:
        return SKIP
    return FileDecision(True, name)

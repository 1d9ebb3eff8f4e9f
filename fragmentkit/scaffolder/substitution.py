"""Placeholder substitution for emitted text files.

Only files whose final name is in ``SUBSTITUTED_FILES`` are touched.  Content
that does not decode as UTF-8 is returned unchanged.
"""

from __future__ import annotations

from .manifest import Manifest
from .package_manager import PackageManager


SUBSTITUTED_FILES: frozenset[str] = frozenset({
    "Cargo.toml",
    "package.json",
    "tauri.conf.json",
    "main.rs",
    "vite.config.ts",
    "vite.config.js",
    "Trunk.toml",
    "angular.json",
})


def lib_name_for(package_name: str) -> str:
    """``my-app`` -> ``my_app_lib``."""
    return f"{package_name.replace('-', '_')}_lib"


def replace_vars(
    content: str,
    package_name: str,
    pkg_manager: PackageManager,
    manifest: Manifest,
) -> str:
    """Apply manifest variables, then the built-in placeholders.

    Each step runs over the output of the previous one, so manifest values may
    themselves contain built-in placeholders such as ``~pkg_manager_run_command~``.
    """
    content = manifest.replace_vars(content)
    content = content.replace("~lib_name~", lib_name_for(package_name))
    content = content.replace("~package_name~", package_name)
    content = content.replace("~pkg_manager_run_command~", pkg_manager.run_command)
    return content.replace(
        "~double-dash~", " --" if pkg_manager.needs_double_dash else ""
    )


def substitute_file(
    file_name: str,
    data: bytes,
    package_name: str,
    pkg_manager: PackageManager,
    manifest: Manifest,
) -> bytes:
    """Return *data* with placeholders replaced when *file_name* is eligible."""
    if file_name not in SUBSTITUTED_FILES:
        return data
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError:
        return data
    return replace_vars(content, package_name, pkg_manager, manifest).encode("utf-8")

"""Exceptions raised by the fragment rendering engine.

Every failure is terminal for the current render: nothing here is retried and
files written before the failure stay on disk.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error surfaced by the scaffolder."""


class AssetNotFoundError(ScaffoldError):
    """Raised when a manifest marker or a manifest-declared asset is missing."""

    def __init__(self, path: str, message: str = "") -> None:
        self.path = path
        super().__init__(message or f"Asset not found in fragment store: {path}")


class ManifestParseError(ScaffoldError):
    """Raised when a ``_cta_manifest_`` file cannot be parsed."""

    def __init__(self, detail: str, line: int | None = None) -> None:
        self.detail = detail
        self.line = line
        if line is None:
            super().__init__(f"Invalid manifest: {detail}")
        else:
            super().__init__(f"Invalid manifest (line {line}): {detail}")


class RenderIOError(ScaffoldError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")


class IncompatibleManagerError(ScaffoldError):
    """Raised when a package manager cannot drive the chosen template."""

    def __init__(self, template: str, pkg_manager: str, valid: list[str]) -> None:
        self.template = template
        self.pkg_manager = pkg_manager
        self.valid = valid
        super().__init__(
            f"{template} template is not supported with {pkg_manager}. "
            f"Supported package managers are [{', '.join(valid)}]"
        )


class CatalogParseError(ScaffoldError, ValueError):
    """Raised when a template or package-manager identifier is unknown.

    The message lists every valid identifier so the CLI can show it as-is.
    """

    def __init__(self, kind: str, value: str, valid: list[str]) -> None:
        self.kind = kind
        self.value = value
        self.valid = valid
        super().__init__(
            f"{value} is not a valid {kind}. Valid {kind}s are [{', '.join(valid)}]"
        )

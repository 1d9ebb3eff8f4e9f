"""Main scaffolding orchestrator.

Materialises a template into a target directory from a fragment store in three
strictly ordered phases:

1. every entry of the ``_base_`` zone,
2. every entry of the template's own ``fragment-<id>`` zone, overwriting base
   files that share a final relative path,
3. every ``[files]`` entry of the template manifest, appended to its
   destination in manifest order.

Each entry goes through the same pipeline: resolve the conditional file name,
read its bytes, substitute placeholders when the file is eligible, write.  The
first failure aborts the render; files already written are left in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .assets import (
    BASE_ZONE,
    MANIFEST_MARKER,
    AssetStore,
    asset_path,
    entries_in_zone,
    strip_zone,
)
from .catalog import Template
from .conditional import RenderContext, resolve_file_name
from .errors import AssetNotFoundError, ManifestParseError, RenderIOError
from .manifest import Manifest, parse_manifest
from .package_manager import PackageManager
from .substitution import substitute_file


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


@dataclass
class RenderReport:
    """What a successful render produced."""

    target_dir: Path
    template: Template
    written: list[Path] = field(default_factory=list)
    appended: list[Path] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def files(self) -> list[Path]:
        """Every distinct output path, in first-write order."""
        return list(dict.fromkeys(self.written + self.appended))


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Renders one template from an ``AssetStore`` into a directory.

    The generator holds no per-render state, so a single instance can render
    into several distinct target directories.
    """

    def __init__(self, store: AssetStore, template: Template) -> None:
        self.store = store
        self.template = template

    # -- Public API --------------------------------------------------------

    def render(
        self,
        target_dir: str | Path,
        pkg_manager: PackageManager,
        package_name: str,
        alpha: bool = False,
        mobile: bool = False,
    ) -> RenderReport:
        """Render the template into *target_dir*.

        Args:
            target_dir: Directory the project is written into.  Created if
                missing; existing files may be overwritten or appended to.
            pkg_manager: Package manager selected by the caller.  Its
                compatibility with the template must already be checked.
            package_name: Name substituted for ``~package_name~``.
            alpha: Render for the pre-release channel.
            mobile: Render for mobile targets (only meaningful with *alpha*).

        Returns:
            A ``RenderReport`` listing written, appended and skipped entries.

        Raises:
            AssetNotFoundError: The manifest or a declared asset is missing.
            ManifestParseError: The manifest could not be parsed.
            RenderIOError: A directory or file could not be written.
        """
        target = Path(target_dir)
        context = RenderContext(pkg_manager=pkg_manager, alpha=alpha, mobile=mobile)
        manifest = self.load_manifest(mobile)
        report = RenderReport(target_dir=target, template=self.template)

        # 1. Shared base files
        self._write_zone(BASE_ZONE, target, context, package_name, manifest, report)

        # 2. Template files, which may override base files
        self._write_zone(
            self.template.fragment_zone, target, context, package_name, manifest, report
        )

        # 3. Extra files declared by the manifest
        self._append_extra_files(target, manifest, report)

        return report

    def load_manifest(self, mobile: bool = False) -> Manifest:
        """Read and parse the template's ``_cta_manifest_`` marker.

        The template zone is searched first, then ``_base_``.
        """
        candidates = [
            f"{self.template.fragment_zone}/{MANIFEST_MARKER}",
            f"{BASE_ZONE}/{MANIFEST_MARKER}",
        ]
        for path in candidates:
            data = self.store.get(path)
            if data is None:
                continue
            try:
                text = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ManifestParseError(f"{path} is not valid UTF-8: {exc}") from exc
            return parse_manifest(text, mobile)

        raise AssetNotFoundError(
            candidates[0],
            f"Failed to get manifest for template {self.template.value}: {candidates[0]}",
        )

    # -- Phases ------------------------------------------------------------

    def _write_zone(
        self,
        zone: str,
        target: Path,
        context: RenderContext,
        package_name: str,
        manifest: Manifest,
        report: RenderReport,
    ) -> None:
        for entry in entries_in_zone(self.store, zone):
            relative = strip_zone(entry)
            decision = resolve_file_name(relative.name, context)
            if not decision.include:
                if relative.name != MANIFEST_MARKER:
                    report.skipped.append(entry)
                continue

            data = self.store.get(entry)
            if data is None:
                raise AssetNotFoundError(entry)
            data = substitute_file(
                decision.final_name, data, package_name, context.pkg_manager, manifest
            )

            dest = _join(target, relative.parent / decision.final_name)
            _write_bytes(dest, data)
            report.written.append(dest)

    def _append_extra_files(
        self, target: Path, manifest: Manifest, report: RenderReport
    ) -> None:
        for extra in manifest.files:
            source = asset_path(extra.asset)
            data = self.store.get(source)
            if data is None:
                raise AssetNotFoundError(
                    source, f"Failed to get asset file bytes: {extra.asset}"
                )
            dest = _join(target, PurePosixPath(extra.dest))
            _append_bytes(dest, data)
            report.appended.append(dest)


def render_template(
    store: AssetStore,
    template: Template,
    target_dir: str | Path,
    pkg_manager: PackageManager,
    package_name: str,
    alpha: bool = False,
    mobile: bool = False,
) -> RenderReport:
    """Shortcut for ``ProjectGenerator(store, template).render(...)``."""
    generator = ProjectGenerator(store, template)
    return generator.render(target_dir, pkg_manager, package_name, alpha, mobile)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _join(target: Path, relative: PurePosixPath) -> Path:
    # Template authors are trusted; ``..`` components are not rejected.
    return target.joinpath(*relative.parts)


def _write_bytes(path: Path, data: bytes) -> None:
    """Create parent dirs and truncate-write *data*."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise RenderIOError(path, exc) from exc


def _append_bytes(path: Path, data: bytes) -> None:
    """Create parent dirs and append *data*, creating the file if needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("ab") as fh:
            fh.write(data)
    except OSError as exc:
        raise RenderIOError(path, exc) from exc

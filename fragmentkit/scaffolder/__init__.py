"""Fragment scaffolder -- materialises starter projects from a fragment store.

A render layers the shared ``_base_`` zone, then the template's own
``fragment-<id>`` zone, then the extra assets listed in the template manifest.
Conditional file names (``%(flags)%name``) select files per package manager and
release channel, and a fixed allow-list of files gets ``~placeholder~``
substitution.

Quick usage::

    from fragmentkit.scaffolder import (
        DirectoryAssetStore, PackageManager, ProjectGenerator, Template,
    )

    store = DirectoryAssetStore("./fragments")
    generator = ProjectGenerator(store, Template.REACT_TS)
    report = generator.render("./my-app", PackageManager.PNPM, "my-app")
"""

from fragmentkit.scaffolder.assets import (
    ASSETS_ZONE,
    BASE_ZONE,
    MANIFEST_MARKER,
    AssetStore,
    DirectoryAssetStore,
    MemoryAssetStore,
)
from fragmentkit.scaffolder.catalog import (
    ALL_TEMPLATES,
    SELECTABLE_TEMPLATES,
    Flavor,
    Template,
    parse_template,
)
from fragmentkit.scaffolder.conditional import FileDecision, RenderContext, resolve_file_name
from fragmentkit.scaffolder.errors import (
    AssetNotFoundError,
    CatalogParseError,
    IncompatibleManagerError,
    ManifestParseError,
    RenderIOError,
    ScaffoldError,
)
from fragmentkit.scaffolder.generator import ProjectGenerator, RenderReport, render_template
from fragmentkit.scaffolder.manifest import Manifest, parse_manifest
from fragmentkit.scaffolder.package_manager import (
    ALL_MANAGERS,
    NODE_MANAGERS,
    PackageManager,
    parse_package_manager,
)
from fragmentkit.scaffolder.templates import TemplateRenderer

__all__ = [
    "ALL_MANAGERS",
    "ALL_TEMPLATES",
    "ASSETS_ZONE",
    "AssetNotFoundError",
    "AssetStore",
    "BASE_ZONE",
    "CatalogParseError",
    "DirectoryAssetStore",
    "FileDecision",
    "Flavor",
    "IncompatibleManagerError",
    "MANIFEST_MARKER",
    "Manifest",
    "ManifestParseError",
    "MemoryAssetStore",
    "NODE_MANAGERS",
    "PackageManager",
    "ProjectGenerator",
    "RenderContext",
    "RenderIOError",
    "RenderReport",
    "SELECTABLE_TEMPLATES",
    "ScaffoldError",
    "Template",
    "TemplateRenderer",
    "parse_manifest",
    "parse_package_manager",
    "parse_template",
    "render_template",
    "resolve_file_name",
]

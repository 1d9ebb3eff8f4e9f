"""fragmentkit configuration.

Typed configuration for a scaffolding run.  Settings use a Pydantic v2 model so
they are validated at construction time and can be serialised to/from JSON or
read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from fragmentkit.scaffolder.catalog import Flavor, Template
from fragmentkit.scaffolder.errors import IncompatibleManagerError
from fragmentkit.scaffolder.package_manager import PackageManager


_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Everything needed to scaffold one project.

    Instances are typically created once by the CLI entry point and then
    passed to the generator.
    """

    project_name: str = Field(default="tauri-app", description="Package name of the new project")
    output_dir: Path = Field(default=Path("."), description="Parent of the project directory")
    fragments_dir: Optional[Path] = Field(
        default=None, description="Unpacked fragment library (_base_, fragment-*, _assets_)"
    )
    template: Template = Field(default=Template.VANILLA)
    package_manager: PackageManager = Field(default=PackageManager.PNPM)
    flavor: Optional[Flavor] = Field(
        default=None, description="Language flavour applied to templates that support one"
    )
    alpha: bool = Field(default=False, description="Render for the pre-release channel")
    mobile: bool = Field(default=False, description="Render mobile targets (alpha only)")
    force: bool = Field(default=False, description="Empty a non-empty target directory first")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def project_dir(self) -> Path:
        """Directory the project is rendered into."""
        return self.output_dir / self.project_name

    def resolved_template(self) -> Template:
        """The template after applying ``flavor`` (if the template has flavours)."""
        if self.flavor is None:
            return self.template
        base = self.template.without_flavor()
        if self.flavor not in (base.flavors(self.package_manager) or ()):
            return self.template
        return base.with_flavor(self.flavor)

    def validate_compatibility(self) -> None:
        """Reject a package manager the resolved template cannot be used with.

        Raises:
            IncompatibleManagerError: If the pair is not in the compatibility
                table.
        """
        template = self.resolved_template()
        managers = template.compatible_managers()
        if self.package_manager not in managers:
            raise IncompatibleManagerError(
                template.value,
                self.package_manager.value,
                [pm.value for pm in managers],
            )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FRAGMENTKIT_PROJECT_NAME, FRAGMENTKIT_OUTPUT_DIR,
            FRAGMENTKIT_FRAGMENTS_DIR, FRAGMENTKIT_TEMPLATE, FRAGMENTKIT_MANAGER,
            FRAGMENTKIT_ALPHA, FRAGMENTKIT_MOBILE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FRAGMENTKIT_PROJECT_NAME"):
            kwargs["project_name"] = os.environ["FRAGMENTKIT_PROJECT_NAME"]
        if os.environ.get("FRAGMENTKIT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["FRAGMENTKIT_OUTPUT_DIR"])
        if os.environ.get("FRAGMENTKIT_FRAGMENTS_DIR"):
            kwargs["fragments_dir"] = Path(os.environ["FRAGMENTKIT_FRAGMENTS_DIR"])
        if os.environ.get("FRAGMENTKIT_TEMPLATE"):
            kwargs["template"] = os.environ["FRAGMENTKIT_TEMPLATE"]
        if os.environ.get("FRAGMENTKIT_MANAGER"):
            kwargs["package_manager"] = os.environ["FRAGMENTKIT_MANAGER"]

        kwargs["alpha"] = os.environ.get("FRAGMENTKIT_ALPHA", "").lower() in _TRUTHY
        kwargs["mobile"] = os.environ.get("FRAGMENTKIT_MOBILE", "").lower() in _TRUTHY

        return cls(**kwargs)

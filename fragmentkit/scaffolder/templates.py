"""Jinja2 rendering for the messages printed after scaffolding.

Fragment files themselves are never run through Jinja2: their placeholders use
the ``~name~`` syntax handled by :mod:`.substitution`.  This module only
renders the human-facing text shown once a project has been generated.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from .catalog import Template
from .package_manager import PackageManager


NEXT_STEPS_TEMPLATE = """\
Template created! To get started run:
  cd {{ project_dir | shell_quote }}
{% if install_command %}
  {{ install_command }}
{% endif %}
{% if needs_wasm_target %}

For {{ template }}, you also need to install
  rustup target add wasm32-unknown-unknown
{% endif %}
{% if needs_wasm_build_tool %}
  cargo install trunk
{% endif %}
{% if needs_companion_cli %}
  cargo install tauri-cli --version "^2.0.0" --locked
{% endif %}
  {{ dev_command }}
{% if alpha and mobile %}

For Android (make sure you have set up your environment first):
  {{ mobile_command }} android init
  {{ mobile_command }} android dev

For iOS (macOS only):
  {{ mobile_command }} ios init
  {{ mobile_command }} ios dev
{% endif %}
"""

_TEMPLATES: dict[str, str] = {
    "next_steps.txt.j2": NEXT_STEPS_TEMPLATE,
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the built-in message templates.

    Additional templates may be passed in to override or extend the built-in
    set (keyed by template name).
    """

    def __init__(self, templates: dict[str, str] | None = None) -> None:
        self.env = Environment(
            loader=DictLoader({**_TEMPLATES, **(templates or {})}),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["shell_quote"] = _shell_quote_filter

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a named template with the provided context."""
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_next_steps(
        self,
        project_dir: str | Path,
        template: Template,
        pkg_manager: PackageManager,
        alpha: bool = False,
        mobile: bool = False,
    ) -> str:
        """Render the "To get started run:" instructions."""
        return self.render(
            "next_steps.txt.j2",
            next_steps_context(project_dir, template, pkg_manager, alpha, mobile),
        )


def next_steps_context(
    project_dir: str | Path,
    template: Template,
    pkg_manager: PackageManager,
    alpha: bool = False,
    mobile: bool = False,
) -> dict[str, Any]:
    """Build the context for ``next_steps.txt.j2``."""
    is_cargo = pkg_manager is PackageManager.CARGO
    tauri_command = "cargo tauri" if is_cargo else f"{pkg_manager.run_command} tauri"
    return {
        "project_dir": str(project_dir),
        "template": template.value,
        "install_command": pkg_manager.install_command,
        "needs_wasm_target": template.needs_wasm_target,
        "needs_wasm_build_tool": template.needs_wasm_build_tool,
        "needs_companion_cli": is_cargo and template.needs_companion_cli,
        "dev_command": f"{tauri_command} dev",
        "mobile_command": tauri_command,
        "alpha": alpha,
        "mobile": mobile,
    }


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _shell_quote_filter(value: str) -> str:
    """Quote a path for display in a shell command when it contains spaces."""
    if any(ch.isspace() for ch in value):
        return f'"{value}"'
    return value

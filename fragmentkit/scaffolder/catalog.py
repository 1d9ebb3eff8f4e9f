"""Static catalogue of starter templates.

Every template is a member of the closed ``Template`` enumeration.  Templates
that come in a JavaScript and a TypeScript flavour have a ``-ts`` sibling;
``with_flavor`` / ``without_flavor`` move between the two.  The tables below
are the single source of truth for flavour support, package-manager
compatibility and the tooling a template needs.
"""

from __future__ import annotations

from enum import Enum

from .errors import CatalogParseError
from .package_manager import ALL_MANAGERS, NODE_MANAGERS, PackageManager


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Flavor(str, Enum):
    """Language surface of a JS template."""
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"

    def __str__(self) -> str:
        return self.value


class Template(str, Enum):
    """Starter templates. The value is the canonical identifier."""
    VANILLA = "vanilla"
    VANILLA_TS = "vanilla-ts"
    VUE = "vue"
    VUE_TS = "vue-ts"
    SVELTE = "svelte"
    SVELTE_TS = "svelte-ts"
    REACT = "react"
    REACT_TS = "react-ts"
    SOLID = "solid"
    SOLID_TS = "solid-ts"
    YEW = "yew"
    LEPTOS = "leptos"
    SYCAMORE = "sycamore"
    ANGULAR = "angular"
    PREACT = "preact"
    PREACT_TS = "preact-ts"

    def __str__(self) -> str:
        return self.value

    # -- Display -----------------------------------------------------------

    def select_label(self) -> str:
        """Label for the top-level template menu.

        Raises:
            ValueError: For flavour-suffixed variants, which never appear in
                the menu.
        """
        try:
            return _SELECT_LABELS[self]
        except KeyError:
            raise ValueError(f"{self.value} has no menu label") from None

    @property
    def fragment_zone(self) -> str:
        """Name of the fragment directory holding this template's files."""
        return f"fragment-{self.value}"

    # -- Flavours ----------------------------------------------------------

    def flavors(self, pkg_manager: PackageManager) -> tuple[Flavor, ...] | None:
        """Flavours offered for this template under *pkg_manager*.

        ``vanilla`` has no JS variants when driven by ``cargo`` since there is
        no JS build step in that mode.
        """
        if self is Template.VANILLA and pkg_manager is PackageManager.CARGO:
            return None
        # Node templates still report flavours under cargo; compatible_managers()
        # rejects that pairing before a flavour is ever applied.
        if self in _TS_VARIANTS:
            return (Flavor.TYPESCRIPT, Flavor.JAVASCRIPT)
        return None

    def with_flavor(self, flavor: Flavor) -> Template:
        if flavor is Flavor.TYPESCRIPT:
            return _TS_VARIANTS.get(self, self)
        return self

    def without_flavor(self) -> Template:
        return _BASE_VARIANTS.get(self, self)

    # -- Compatibility & tooling -------------------------------------------

    def compatible_managers(self) -> tuple[PackageManager, ...]:
        if self is Template.VANILLA:
            return ALL_MANAGERS
        if self in _RUST_FRONTENDS:
            return (PackageManager.CARGO,)
        return NODE_MANAGERS

    @property
    def needs_wasm_build_tool(self) -> bool:
        """Whether the frontend is bundled with ``trunk``."""
        return self in _RUST_FRONTENDS

    @property
    def needs_companion_cli(self) -> bool:
        """Whether ``cargo install tauri-cli`` is required to run the app."""
        return self in _RUST_FRONTENDS or self is Template.VANILLA

    @property
    def needs_wasm_target(self) -> bool:
        """Whether the ``wasm32-unknown-unknown`` rustup target is required."""
        return self in _RUST_FRONTENDS


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

_SELECT_LABELS: dict[Template, str] = {
    Template.VANILLA: "Vanilla",
    Template.VUE: "Vue - (https://vuejs.org/)",
    Template.SVELTE: "Svelte - (https://svelte.dev/)",
    Template.REACT: "React - (https://react.dev/)",
    Template.SOLID: "Solid - (https://solidjs.com/)",
    Template.YEW: "Yew - (https://yew.rs/)",
    Template.LEPTOS: "Leptos - (https://github.com/leptos-rs/leptos)",
    Template.SYCAMORE: "Sycamore - (https://sycamore-rs.netlify.app/)",
    Template.ANGULAR: "Angular - (https://angular.io/)",
    Template.PREACT: "Preact - (https://preactjs.com/)",
}

# Base template -> its TypeScript variant
_TS_VARIANTS: dict[Template, Template] = {
    Template.VANILLA: Template.VANILLA_TS,
    Template.VUE: Template.VUE_TS,
    Template.SVELTE: Template.SVELTE_TS,
    Template.REACT: Template.REACT_TS,
    Template.SOLID: Template.SOLID_TS,
    Template.PREACT: Template.PREACT_TS,
}

_BASE_VARIANTS: dict[Template, Template] = {ts: base for base, ts in _TS_VARIANTS.items()}

_RUST_FRONTENDS: frozenset[Template] = frozenset(
    {Template.YEW, Template.LEPTOS, Template.SYCAMORE}
)

ALL_TEMPLATES: tuple[Template, ...] = tuple(Template)

SELECTABLE_TEMPLATES: tuple[Template, ...] = tuple(_SELECT_LABELS)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_template(text: str) -> Template:
    """Resolve *text* to a ``Template`` by exact identifier match.

    Raises:
        CatalogParseError: With every valid identifier listed.
    """
    try:
        return Template(text)
    except ValueError:
        raise CatalogParseError(
            "template", text, [t.value for t in ALL_TEMPLATES]
        ) from None

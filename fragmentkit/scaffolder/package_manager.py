"""Package managers a generated project can be driven by.

The set is closed: one native manager (``cargo``) and the JS-ecosystem
managers collected in ``NODE_MANAGERS``.
"""

from __future__ import annotations

from enum import Enum

from .errors import CatalogParseError


class PackageManager(str, Enum):
    """Supported package managers. The value is the display identifier."""
    CARGO = "cargo"
    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value

    @property
    def run_command(self) -> str:
        """Literal used to run a package script, e.g. ``npm run``."""
        return _RUN_COMMANDS[self]

    @property
    def install_command(self) -> str | None:
        """Command that installs JS dependencies, ``None`` for ``cargo``."""
        if self is PackageManager.CARGO:
            return None
        return f"{self.value} install"

    @property
    def needs_double_dash(self) -> bool:
        """Whether ``--`` must precede arguments passed through a script."""
        return self is PackageManager.NPM

    @property
    def is_node(self) -> bool:
        return self in NODE_MANAGERS

    def select_label(self) -> str:
        """Label shown in an interactive picker."""
        return _SELECT_LABELS[self]


_RUN_COMMANDS: dict[PackageManager, str] = {
    PackageManager.CARGO: "cargo",
    PackageManager.PNPM: "pnpm",
    PackageManager.YARN: "yarn",
    PackageManager.NPM: "npm run",
    PackageManager.BUN: "bun run",
}

_SELECT_LABELS: dict[PackageManager, str] = {
    PackageManager.CARGO: "cargo (https://doc.rust-lang.org/cargo/)",
    PackageManager.PNPM: "pnpm (https://pnpm.io/)",
    PackageManager.YARN: "yarn (https://yarnpkg.com/)",
    PackageManager.NPM: "npm (https://www.npmjs.com/)",
    PackageManager.BUN: "bun (https://bun.sh/)",
}

ALL_MANAGERS: tuple[PackageManager, ...] = tuple(PackageManager)

NODE_MANAGERS: tuple[PackageManager, ...] = (
    PackageManager.PNPM,
    PackageManager.YARN,
    PackageManager.NPM,
    PackageManager.BUN,
)


def parse_package_manager(text: str) -> PackageManager:
    """Resolve *text* to a ``PackageManager`` by exact identifier match.

    Raises:
        CatalogParseError: If *text* is not a known identifier.
    """
    try:
        return PackageManager(text)
    except ValueError:
        raise CatalogParseError(
            "package manager", text, [pm.value for pm in ALL_MANAGERS]
        ) from None

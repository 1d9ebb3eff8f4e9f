"""Tests for fragmentkit.scaffolder.package_manager."""

from __future__ import annotations

import pytest

from fragmentkit.scaffolder.errors import CatalogParseError
from fragmentkit.scaffolder.package_manager import (
    ALL_MANAGERS,
    NODE_MANAGERS,
    PackageManager,
    parse_package_manager,
)

pytestmark = pytest.mark.unit


class TestPackageManager:
    def test_display_identifiers(self):
        assert [str(pm) for pm in ALL_MANAGERS] == ["cargo", "pnpm", "yarn", "npm", "bun"]

    @pytest.mark.parametrize(
        "pm, expected",
        [
            (PackageManager.CARGO, "cargo"),
            (PackageManager.PNPM, "pnpm"),
            (PackageManager.YARN, "yarn"),
            (PackageManager.NPM, "npm run"),
            (PackageManager.BUN, "bun run"),
        ],
    )
    def test_run_command(self, pm, expected):
        assert pm.run_command == expected

    def test_only_npm_needs_double_dash(self):
        assert [pm for pm in ALL_MANAGERS if pm.needs_double_dash] == [PackageManager.NPM]

    def test_node_subset(self):
        assert NODE_MANAGERS == (
            PackageManager.PNPM,
            PackageManager.YARN,
            PackageManager.NPM,
            PackageManager.BUN,
        )
        assert not PackageManager.CARGO.is_node
        assert all(pm.is_node for pm in NODE_MANAGERS)

    def test_install_command(self):
        assert PackageManager.CARGO.install_command is None
        assert PackageManager.YARN.install_command == "yarn install"

    def test_select_label_mentions_identifier(self):
        for pm in ALL_MANAGERS:
            assert pm.select_label().startswith(pm.value)


class TestParsePackageManager:
    def test_parses_every_identifier(self):
        for pm in ALL_MANAGERS:
            assert parse_package_manager(pm.value) is pm

    def test_unknown_lists_valid(self):
        with pytest.raises(CatalogParseError) as exc_info:
            parse_package_manager("deno")
        assert "deno is not a valid package manager" in str(exc_info.value)
        assert "cargo, pnpm, yarn, npm, bun" in str(exc_info.value)

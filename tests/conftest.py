"""Shared pytest fixtures for the fragmentkit test suite.

Provides reusable fixtures for:
- A sample fragment manifest
- A small fragment library covering every zone and flag kind
- The same library as an in-memory store and as a directory on disk
- Temporary target directories
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from fragmentkit.scaffolder.assets import MemoryAssetStore


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

SAMPLE_MANIFEST = textwrap.dedent(
    """\
    # Copyright notice lines are comments
    beforeDevCommand = ~pkg_manager_run_command~ dev~double-dash~ --port 1420
    beforeBuildCommand = ~pkg_manager_run_command~ build # this comment should be stripped
    devPath = http://localhost:1420
    distDir = ../dist

    [mobile]
    devPath = http://0.0.0.0:1420

    [files]
    tauri.svg = src/assets/tauri.svg
    icon-part1.bin = src/assets/icon.png
    icon-part2.bin = src/assets/icon.png
    """
)

TAURI_CONF = (
    '{"productName": "~package_name~", '
    '"build": {"beforeDevCommand": "~fragment_before_dev_command~", '
    '"beforeBuildCommand": "~fragment_before_build_command~", '
    '"devUrl": "~fragment_dev_path~", '
    '"frontendDist": "~fragment_dist_dir~"}}\n'
)


@pytest.fixture
def sample_manifest_text() -> str:
    """Manifest with variables, a mobile override and three extra files."""
    return SAMPLE_MANIFEST


# ---------------------------------------------------------------------------
# Fragment library
# ---------------------------------------------------------------------------

@pytest.fixture
def fragment_files() -> dict[str, bytes]:
    """A fragment library for the ``vanilla`` and ``yew`` templates."""
    files: dict[str, str | bytes] = {
        # Shared base zone
        "_base_/_gitignore": "node_modules\n",
        "_base_/common/app.css": "body { color: black; }\n",
        "_base_/src-tauri/_Cargo.toml": (
            '[package]\nname = "~package_name~"\n\n[lib]\nname = "~lib_name~"\n'
        ),
        "_base_/src-tauri/tauri.conf.json": TAURI_CONF,
        "_base_/src-tauri/src/main.rs": "fn main() {\n    ~lib_name~::run()\n}\n",
        "_base_/src-tauri/icons/icon.bin": b"\x89PNG\r\n\x1a\n\x00\xff",
        "_base_/%(stable)%README.md": "stable channel\n",
        "_base_/%(alpha)%README.md": "alpha channel\n",
        "_base_/%(mobile)%README.md": "mobile channel\n",
        # vanilla template zone
        "fragment-vanilla/_cta_manifest_": SAMPLE_MANIFEST,
        "fragment-vanilla/common/app.css": "body { color: tomato; }\n",
        "fragment-vanilla/%(pnpm-npm-yarn-bun)%package.json": (
            '{"name": "~package_name~", '
            '"scripts": {"dev": "vite~double-dash~ --host"}}\n'
        ),
        "fragment-vanilla/src/%(cargo)%index.html": "<html>cargo</html>\n",
        "fragment-vanilla/src-tauri/%(mobile)%config.extra.json": "{}\n",
        "fragment-vanilla/src-tauri/%(alpha-mobile)%capabilities.json": "[]\n",
        # yew template zone
        "fragment-yew/_cta_manifest_": "beforeDevCommand = trunk serve\n",
        "fragment-yew/Trunk.toml": '[build]\ntarget = "~package_name~.html"\n',
        # Extra assets
        "_assets_/tauri.svg": "<svg/>\n",
        "_assets_/icon-part1.bin": b"\x89PNG-part-1",
        "_assets_/icon-part2.bin": b"\x00\x01-part-2",
        "_assets_/unused.txt": "never emitted\n",
    }
    return {
        path: data.encode("utf-8") if isinstance(data, str) else data
        for path, data in files.items()
    }


@pytest.fixture
def memory_store(fragment_files: dict[str, bytes]) -> MemoryAssetStore:
    """The sample library as an in-memory store."""
    return MemoryAssetStore(fragment_files)


@pytest.fixture
def fragments_dir(tmp_path: Path, fragment_files: dict[str, bytes]) -> Path:
    """The sample library unpacked into a directory on disk."""
    root = tmp_path / "fragments"
    for virtual_path, data in fragment_files.items():
        file_path = root / virtual_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(data)
    return root


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Directory a project is rendered into (not created in advance)."""
    return tmp_path / "out" / "my-app"

"""Read-only fragment stores.

A store maps virtual POSIX paths to bytes.  The first path component names the
zone an entry lives in:

- ``_base_/...``             shared files emitted for every template
- ``fragment-<id>/...``      template-specific files, may shadow base files
- ``_assets_/<name>``        extra files, only emitted when a manifest asks

The renderer only depends on the ``AssetStore`` protocol, so tests use
``MemoryAssetStore`` while the CLI reads an unpacked fragments directory with
``DirectoryAssetStore``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable


BASE_ZONE = "_base_"
ASSETS_ZONE = "_assets_"
MANIFEST_MARKER = "_cta_manifest_"


@runtime_checkable
class AssetStore(Protocol):
    """Capability interface over the embedded fragment library."""

    def get(self, path: str) -> bytes | None:
        """Return the bytes stored at *path*, or ``None`` if absent."""
        ...

    def iterate(self) -> Iterable[str]:
        """Yield every virtual path in the store, in no particular order."""
        ...


# ---------------------------------------------------------------------------
# Implementations
# ---------------------------------------------------------------------------


class MemoryAssetStore:
    """Dict-backed store. Enumeration follows insertion order."""

    def __init__(self, files: Mapping[str, bytes | str] | None = None) -> None:
        self._files: dict[str, bytes] = {}
        for path, data in (files or {}).items():
            self.add(path, data)

    def add(self, path: str, data: bytes | str) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._files[_normalise(path)] = data

    def get(self, path: str) -> bytes | None:
        return self._files.get(_normalise(path))

    def iterate(self) -> Iterator[str]:
        return iter(list(self._files))

    def __len__(self) -> int:
        return len(self._files)


class DirectoryAssetStore:
    """Store backed by a fragments directory on disk.

    Virtual paths are the POSIX form of each file's path relative to *root*.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise NotADirectoryError(f"Fragments directory not found: {self.root}")

    def get(self, path: str) -> bytes | None:
        file_path = self.root / PurePosixPath(path)
        if not file_path.is_file():
            return None
        return file_path.read_bytes()

    def iterate(self) -> Iterator[str]:
        for file_path in self.root.rglob("*"):
            if file_path.is_file():
                yield file_path.relative_to(self.root).as_posix()


# ---------------------------------------------------------------------------
# Zone helpers
# ---------------------------------------------------------------------------


def zone_of(path: str) -> str:
    """Return the zone (first path component) of a virtual path."""
    return PurePosixPath(path).parts[0]


def strip_zone(path: str) -> PurePosixPath:
    """Drop the zone component, leaving the path relative to the output root."""
    return PurePosixPath(*PurePosixPath(path).parts[1:])


def entries_in_zone(store: AssetStore, zone: str) -> list[str]:
    """All virtual paths of *store* that belong to *zone*."""
    return [path for path in store.iterate() if zone_of(path) == zone]


def asset_path(name: str) -> str:
    """Virtual path of an extra asset referenced by a manifest."""
    return f"{ASSETS_ZONE}/{name}"


def _normalise(path: str) -> str:
    """``./_base_//x`` -> ``_base_/x``."""
    return str(PurePosixPath(path))

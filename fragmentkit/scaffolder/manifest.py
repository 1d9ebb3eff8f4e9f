"""Fragment manifests (``_cta_manifest_`` files).

A manifest is a small line-oriented file::

    # comments and blank lines are ignored
    beforeDevCommand = ~pkg_manager_run_command~ dev
    devPath = http://localhost:1420   # trailing comments are stripped

    [mobile]
    devPath = http://0.0.0.0:1420

    [files]
    tauri.svg = public/tauri.svg

Top-level keys become ``~fragment_<snake_key>~`` placeholders.  Keys under
``[mobile]`` override them only when rendering for mobile.  ``[files]`` lists
extra assets (``_assets_/<name>``) appended to destination paths, in order.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from .errors import ManifestParseError


FILES_SECTION = "files"
MOBILE_SECTION = "mobile"

# Always present so their placeholders are consumed even when unset.
DEFAULT_VARIABLES: dict[str, str] = {
    "beforeDevCommand": "",
    "beforeBuildCommand": "",
    "devPath": "",
    "distDir": "",
    "withGlobalTauri": "false",
}

_SECTION_RE = re.compile(r"^\[(?P<name>[^\]]*)\]$")
_COMMENT_RE = re.compile(r"\s#")


class ManifestFile(BaseModel):
    """An extra asset appended to a destination path."""
    asset: str = Field(..., description="Name under the _assets_ zone")
    dest: str = Field(..., description="Destination path relative to the target directory")


class Manifest(BaseModel):
    """Parsed manifest: variables plus the ordered extra-files list."""
    variables: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_VARIABLES),
        description="Manifest key -> replacement text",
    )
    files: list[ManifestFile] = Field(
        default_factory=list,
        description="Extra assets in declaration order",
    )

    def placeholders(self) -> dict[str, str]:
        """Map every ``~fragment_*~`` placeholder to its replacement."""
        return {placeholder_for(key): value for key, value in self.variables.items()}

    def replace_vars(self, content: str) -> str:
        """Substitute manifest placeholders in *content*.

        Placeholders that the manifest does not define are left intact.
        """
        for placeholder, value in self.placeholders().items():
            content = content.replace(placeholder, value)
        return content


def placeholder_for(key: str) -> str:
    """``beforeDevCommand`` -> ``~fragment_before_dev_command~``."""
    snake = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", key)
    snake = re.sub(r"[-\s.]+", "_", snake).lower()
    return f"~fragment_{snake}~"


def _strip_comment(value: str) -> str:
    match = _COMMENT_RE.search(value)
    if match is None:
        return value
    return value[: match.start()].rstrip()


def parse_manifest(text: str, mobile: bool = False) -> Manifest:
    """Parse manifest *text*.

    Args:
        text: Decoded contents of a ``_cta_manifest_`` file.
        mobile: Whether ``[mobile]`` overrides apply.

    Raises:
        ManifestParseError: On an unknown section or a line that is not
            ``key = value``.
    """
    variables = dict(DEFAULT_VARIABLES)
    mobile_overrides: dict[str, str] = {}
    files: list[ManifestFile] = []
    section = ""

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        header = _SECTION_RE.match(line)
        if header:
            section = header.group("name").strip()
            if section not in (FILES_SECTION, MOBILE_SECTION):
                raise ManifestParseError(f"unknown section [{section}]", line_number)
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        value = _strip_comment(value.strip())
        if not sep:
            raise ManifestParseError(f"expected `key = value`, got {line!r}", line_number)
        if not key:
            raise ManifestParseError("missing key before `=`", line_number)

        if section == FILES_SECTION:
            if not value:
                raise ManifestParseError(f"missing destination for {key}", line_number)
            files.append(ManifestFile(asset=key, dest=value))
        elif section == MOBILE_SECTION:
            mobile_overrides[key] = value
        else:
            variables[key] = value

    if mobile:
        variables.update(mobile_overrides)

    return Manifest(variables=variables, files=files)

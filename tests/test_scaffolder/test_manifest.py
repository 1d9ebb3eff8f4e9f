"""Tests for manifest parsing (fragmentkit.scaffolder.manifest).

Covers:
- Variables, defaults and comment stripping
- The [files] section (order, duplicates)
- The [mobile] section
- Parse errors with line numbers
- replace_vars and placeholder naming
"""

from __future__ import annotations

import pytest

from fragmentkit.scaffolder.errors import ManifestParseError
from fragmentkit.scaffolder.manifest import (
    DEFAULT_VARIABLES,
    Manifest,
    ManifestFile,
    parse_manifest,
    placeholder_for,
)

pytestmark = pytest.mark.unit


class TestParseManifest:
    def test_variables(self, sample_manifest_text):
        manifest = parse_manifest(sample_manifest_text)
        assert manifest.variables["beforeDevCommand"] == (
            "~pkg_manager_run_command~ dev~double-dash~ --port 1420"
        )
        assert manifest.variables["devPath"] == "http://localhost:1420"
        assert manifest.variables["distDir"] == "../dist"

    def test_trailing_comment_stripped(self, sample_manifest_text):
        manifest = parse_manifest(sample_manifest_text)
        assert manifest.variables["beforeBuildCommand"] == "~pkg_manager_run_command~ build"

    def test_hash_without_leading_space_is_kept(self):
        manifest = parse_manifest("devPath = http://localhost:1420/#/home\n")
        assert manifest.variables["devPath"] == "http://localhost:1420/#/home"

    def test_defaults_present_for_empty_manifest(self):
        manifest = parse_manifest("")
        assert manifest.variables == DEFAULT_VARIABLES
        assert manifest.files == []

    def test_files_in_declaration_order(self, sample_manifest_text):
        manifest = parse_manifest(sample_manifest_text)
        assert manifest.files == [
            ManifestFile(asset="tauri.svg", dest="src/assets/tauri.svg"),
            ManifestFile(asset="icon-part1.bin", dest="src/assets/icon.png"),
            ManifestFile(asset="icon-part2.bin", dest="src/assets/icon.png"),
        ]

    def test_mobile_section_ignored_by_default(self, sample_manifest_text):
        manifest = parse_manifest(sample_manifest_text, mobile=False)
        assert manifest.variables["devPath"] == "http://localhost:1420"

    def test_mobile_section_overrides(self, sample_manifest_text):
        manifest = parse_manifest(sample_manifest_text, mobile=True)
        assert manifest.variables["devPath"] == "http://0.0.0.0:1420"
        assert manifest.variables["distDir"] == "../dist"

    def test_custom_keys_accepted(self):
        manifest = parse_manifest("appTitle = Hello World\n")
        assert manifest.variables["appTitle"] == "Hello World"

    def test_value_may_contain_equals(self):
        manifest = parse_manifest("devPath = http://host/?a=b\n")
        assert manifest.variables["devPath"] == "http://host/?a=b"


class TestParseErrors:
    def test_line_without_equals(self):
        with pytest.raises(ManifestParseError) as exc_info:
            parse_manifest("# header\n\nnot a pair\n")
        assert exc_info.value.line == 3
        assert "line 3" in str(exc_info.value)

    def test_missing_key(self):
        with pytest.raises(ManifestParseError) as exc_info:
            parse_manifest(" = value\n")
        assert exc_info.value.line == 1

    def test_unknown_section(self):
        with pytest.raises(ManifestParseError, match="unknown section"):
            parse_manifest("[deps]\nfoo = bar\n")

    def test_file_without_destination(self):
        with pytest.raises(ManifestParseError, match="missing destination"):
            parse_manifest("[files]\ntauri.svg =\n")


class TestReplaceVars:
    def test_placeholder_naming(self):
        assert placeholder_for("beforeDevCommand") == "~fragment_before_dev_command~"
        assert placeholder_for("devPath") == "~fragment_dev_path~"
        assert placeholder_for("withGlobalTauri") == "~fragment_with_global_tauri~"

    def test_replaces_known_and_default_placeholders(self, sample_manifest_text):
        manifest = parse_manifest(sample_manifest_text)
        content = '"~fragment_dev_path~" ~fragment_with_global_tauri~'
        assert manifest.replace_vars(content) == '"http://localhost:1420" false'

    def test_unset_default_becomes_empty(self):
        manifest = parse_manifest("devPath = x\n")
        assert manifest.replace_vars("[~fragment_dist_dir~]") == "[]"

    def test_unknown_placeholders_left_intact(self):
        manifest = Manifest()
        assert manifest.replace_vars("~fragment_nope~ ~package_name~") == (
            "~fragment_nope~ ~package_name~"
        )

    def test_builtin_placeholders_not_touched(self, sample_manifest_text):
        manifest = parse_manifest(sample_manifest_text)
        result = manifest.replace_vars("~fragment_before_build_command~")
        assert result == "~pkg_manager_run_command~ build"

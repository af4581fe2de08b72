"""Unit tests for metatag.cli.main using click's CliRunner."""
from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from metatag.cli.main import cli


def _make_runner() -> CliRunner:
    return CliRunner()


class TestVersion:
    def test_version_command(self) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "metatag" in result.output


class TestInspect:
    def test_class_table(self) -> None:
        result = _make_runner().invoke(
            cli,
            ["inspect", "sample_model:CachedUserRepository", "--tag", "sample_model:Service"],
        )
        assert result.exit_code == 0
        assert "Service" in result.output

    def test_method_table(self) -> None:
        result = _make_runner().invoke(
            cli,
            ["inspect", "sample_model:UserRepository.count", "-t", "sample_model:Transactional"],
        )
        assert result.exit_code == 0
        assert "Transactional" in result.output

    def test_json_output_file(self, tmp_path: Path) -> None:
        out = tmp_path / "report.json"
        result = _make_runner().invoke(
            cli,
            [
                "inspect",
                "sample_model:CachedUserRepository",
                "--tag",
                "sample_model:Service",
                "--tag",
                "sample_model:Marker",
                "--format",
                "json",
                "--output",
                str(out),
            ],
        )
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["results"][0]["declaring_class"] == "sample_model:BaseRepository"
        assert data["any_of_declaring_class"] == "sample_model:BaseRepository"

    def test_yaml_output_file(self, tmp_path: Path) -> None:
        out = tmp_path / "report.yaml"
        result = _make_runner().invoke(
            cli,
            [
                "inspect",
                "sample_model:CachedUserRepository.find",
                "--tag",
                "sample_model:Transactional",
                "--format",
                "yaml",
                "-o",
                str(out),
            ],
        )
        assert result.exit_code == 0
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert data["kind"] == "method"
        assert data["results"][0]["tag"]["attributes"]["value"] == "repo"


class TestInspectErrors:
    def test_malformed_reference(self) -> None:
        result = _make_runner().invoke(
            cli, ["inspect", "sample_model", "--tag", "sample_model:Service"]
        )
        assert result.exit_code == 1

    def test_unknown_module(self) -> None:
        result = _make_runner().invoke(
            cli, ["inspect", "no_such_module_xyz:Thing", "--tag", "sample_model:Service"]
        )
        assert result.exit_code == 1

    def test_missing_attribute(self) -> None:
        result = _make_runner().invoke(
            cli, ["inspect", "sample_model:Nope", "--tag", "sample_model:Service"]
        )
        assert result.exit_code == 1

    def test_tag_reference_must_be_tag_kind(self) -> None:
        result = _make_runner().invoke(
            cli,
            ["inspect", "sample_model:UserRepository", "--tag", "sample_model:UserRepository"],
        )
        assert result.exit_code == 1

    def test_tag_option_required(self) -> None:
        result = _make_runner().invoke(cli, ["inspect", "sample_model:UserRepository"])
        assert result.exit_code == 2

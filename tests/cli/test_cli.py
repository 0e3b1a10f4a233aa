"""Tests for the indent-complexity CLI."""

import json

import pytest
from typer.testing import CliRunner

from indent_complexity import __version__
from indent_complexity.cli import app

runner = CliRunner()

DEEP = "a\n  b\n    c\n      d\n        e\n          f\n            g\n"
FLAT = "a\nb\nc\n"
DIFF = "@@ -1,3 +1,3 @@\n-old line\n-  old nested\n+new line\n+    new deeply nested\n"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of CLI runs."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def source_files(tmp_path):
    deep = tmp_path / "deep.py"
    flat = tmp_path / "flat.py"
    deep.write_text(DEEP)
    flat.write_text(FLAT)
    return deep, flat


class TestVersion:
    """Test --version."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestFileCommand:
    """Test the file subcommand."""

    def test_table_output(self, source_files):
        deep, flat = source_files
        result = runner.invoke(app, ["file", str(deep), str(flat)])
        assert result.exit_code == 0
        assert "HIGH" in result.stdout
        assert "LOW" in result.stdout

    def test_json_single_file(self, source_files):
        deep, _ = source_files
        result = runner.invoke(app, ["file", str(deep), "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["source"] == str(deep)
        assert payload["level"] == "high"
        assert payload["score"] == pytest.approx(13.0)
        assert "line_count" not in payload

    def test_json_multiple_files(self, source_files):
        result = runner.invoke(app, ["file", *map(str, source_files), "--json", "-v"])
        payload = json.loads(result.stdout)
        assert [item["level"] for item in payload] == ["high", "low"]
        assert payload[0]["line_count"] == 7
        assert payload[0]["depth_histogram"] == {str(d): 1 for d in range(7)}

    def test_json_lines(self, source_files):
        _, flat = source_files
        result = runner.invoke(app, ["file", str(flat), "--json", "--lines"])
        payload = json.loads(result.stdout)
        assert payload["lines"][0] == {"line": 1, "depth": 0, "content": "a"}

    def test_stdin(self):
        result = runner.invoke(app, ["file", "-", "--json"], input=DEEP)
        assert result.exit_code == 0
        assert json.loads(result.stdout)["source"] == "<stdin>"

    def test_thresholds(self, source_files):
        _, flat = source_files
        result = runner.invoke(app, ["file", str(flat), "--json", "--medium", "0", "--high", "0"])
        assert json.loads(result.stdout)["level"] == "high"

    def test_no_comment_filter(self):
        source = "a\n# note\n"
        filtered = runner.invoke(app, ["file", "-", "--json", "-v"], input=source)
        unfiltered = runner.invoke(
            app, ["file", "-", "--json", "-v", "--no-comment-filter"], input=source
        )
        assert json.loads(filtered.stdout)["line_count"] == 1
        assert json.loads(unfiltered.stdout)["line_count"] == 2

    def test_fail_on(self, source_files):
        deep, flat = source_files
        assert runner.invoke(app, ["file", str(flat), "--fail-on", "high"]).exit_code == 0
        assert runner.invoke(app, ["file", str(deep), "--fail-on", "high"]).exit_code == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["file", str(tmp_path / "nope.py")])
        assert result.exit_code == 2

    def test_bad_option_value(self, source_files):
        _, flat = source_files
        result = runner.invoke(app, ["file", str(flat), "--fail-on", "extreme"])
        assert result.exit_code == 3

    def test_missing_file_with_brackets_in_path(self, tmp_path):
        """Paths that look like markup still produce the input-error exit code."""
        result = runner.invoke(app, ["file", str(tmp_path / "[red]gone[/x].py")])
        assert result.exit_code == 2

    def test_invalid_pattern_with_brackets(self, source_files):
        _, flat = source_files
        result = runner.invoke(app, ["file", str(flat), "--comment-pattern", "[/x"])
        assert result.exit_code == 3

    def test_string_threshold_in_config(self, tmp_path, source_files):
        _, flat = source_files
        (tmp_path / "indent-complexity.toml").write_text('[thresholds]\nhigh = "8"\n')
        result = runner.invoke(app, ["file", str(flat)])
        assert result.exit_code == 3

    def test_content_with_brackets_renders(self):
        result = runner.invoke(app, ["file", "-", "--lines"], input="x = arr[i]\n  [bold]\n")
        assert result.exit_code == 0
        assert "arr[i]" in result.stdout

    def test_project_config_applies(self, tmp_path, source_files):
        _, flat = source_files
        (tmp_path / "indent-complexity.toml").write_text("[thresholds]\nmedium = 0\n")
        result = runner.invoke(app, ["file", str(flat), "--json"])
        assert json.loads(result.stdout)["level"] == "medium"


class TestDiffCommand:
    """Test the diff subcommand."""

    def test_stdin_default(self):
        result = runner.invoke(app, ["diff", "--json", "-v"], input=DIFF)
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["line_count"] == 2

    def test_include_both(self):
        result = runner.invoke(app, ["diff", "--json", "-v", "--include", "both"], input=DIFF)
        assert json.loads(result.stdout)["line_count"] == 4

    def test_diff_file(self, tmp_path):
        patch = tmp_path / "change.patch"
        patch.write_text(DIFF)
        result = runner.invoke(app, ["diff", str(patch), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["source"] == str(patch)

    def test_table_output(self):
        result = runner.invoke(app, ["diff", "-v"], input=DIFF)
        assert result.exit_code == 0
        assert "LOW" in result.stdout

    def test_invalid_include(self):
        result = runner.invoke(app, ["diff", "--include", "context"], input=DIFF)
        assert result.exit_code == 3

    def test_missing_diff_file_with_brackets(self, tmp_path):
        result = runner.invoke(app, ["diff", str(tmp_path / "[bold]x[/y].patch")])
        assert result.exit_code == 2

    def test_git_outside_repository(self, tmp_path):
        result = runner.invoke(app, ["diff", "--git", "HEAD", "-C", str(tmp_path)])
        assert result.exit_code == 2

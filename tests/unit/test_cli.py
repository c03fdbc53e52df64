"""Tests for the command-line interface."""

import textwrap

import pytest
from click.testing import CliRunner

from tabledump.cli import cli

DOCUMENT = textwrap.dedent(
    """\
    caption: Cities
    headers: [City, {align: right}, Population]
    rows:
      - [London, 8615246]
      - [Paris, 2249975]
    """
)

GROUPED = textwrap.dedent(
    """\
    headers: [Continent, Country, City]
    rows:
      - [Europe, UK, London]
      - [Europe, UK, Leeds]
      - [North America, USA, Chicago]
    """
)


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "cities.yaml"
    path.write_text(DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestRender:
    """Tests for `tabledump render`."""

    def test_render_to_stdout(self, runner, document):
        result = runner.invoke(cli, ["render", "-f", str(document)])
        assert result.exit_code == 0, result.output
        assert "Cities" in result.output
        assert "│London │    8615246│" in result.output
        assert result.output.endswith("┘\n")

    def test_overrides(self, runner, document):
        result = runner.invoke(
            cli,
            ["render", "-f", str(document), "--caption", "Other", "--indent", "3", "--no-separators"],
        )
        assert result.exit_code == 0, result.output
        assert "Other" in result.output
        assert "Cities" not in result.output
        assert "│" not in result.output
        assert "    London " in result.output

    def test_auto_suppress(self, runner, tmp_path):
        path = tmp_path / "grouped.yaml"
        path.write_text(GROUPED, encoding="utf-8")
        result = runner.invoke(cli, ["render", "-f", str(path), "--auto-suppress", "2"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Europe") == 1
        assert result.output.count("├") == 2

        result = runner.invoke(
            cli, ["render", "-f", str(path), "--auto-suppress", "2", "--no-auto-lines"]
        )
        assert result.output.count("├") == 1

    def test_negative_indent_rejected(self, runner, document):
        result = runner.invoke(cli, ["render", "-f", str(document), "--indent", "-1"])
        assert result.exit_code != 0

    def test_csv_input(self, runner, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("name,count\nfoo,1\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", "-f", str(path)])
        assert result.exit_code == 0, result.output
        assert "│name │ count│" in result.output
        assert "│foo  │ 1    │" in result.output

    def test_csv_input_without_header(self, runner, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("foo,1\n", encoding="utf-8")
        result = runner.invoke(
            cli, ["render", "-f", str(path), "--format", "csv", "--no-header"]
        )
        assert result.exit_code == 0, result.output
        assert result.output == "┌────┬──┐\n│foo │ 1│\n└────┴──┘\n"

    def test_write_output_file(self, runner, document, tmp_path):
        out = tmp_path / "out" / "table.txt"
        result = runner.invoke(cli, ["render", "-f", str(document), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "✓ Table written to" in result.output
        assert "│Paris  │    2249975│" in out.read_text(encoding="utf-8")

    def test_append_output_file(self, runner, document, tmp_path):
        out = tmp_path / "table.txt"
        out.write_text("header\n", encoding="utf-8")
        result = runner.invoke(
            cli,
            ["render", "-f", str(document), "-o", str(out), "--append", "--prefix", "\\n"],
        )
        assert result.exit_code == 0, result.output
        content = out.read_text(encoding="utf-8")
        assert content.startswith("header\n\n")
        assert "London" in content

    def test_invalid_document(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("rows: 5\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", "-f", str(path)])
        assert result.exit_code == 1
        assert "rows must be a list" in result.output

    def test_undecodable_csv(self, runner, tmp_path):
        path = tmp_path / "data.csv"
        path.write_bytes(b"name\n\xff\xfe\n")
        result = runner.invoke(cli, ["render", "-f", str(path)])
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["render", "-f", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 2


class TestCsvCommand:
    """Tests for `tabledump csv`."""

    def test_csv_to_stdout(self, runner, document):
        result = runner.invoke(cli, ["csv", "-f", str(document)])
        assert result.exit_code == 0, result.output
        assert result.output == '"City","Population"\nLondon,8615246\nParis,2249975\n'

    def test_csv_to_file(self, runner, document, tmp_path):
        out = tmp_path / "cities.csv"
        result = runner.invoke(cli, ["csv", "-f", str(document), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "✓ CSV written to" in result.output
        assert out.read_text(encoding="utf-8").startswith('"City"')


def test_verbose_flag(runner, document):
    result = runner.invoke(cli, ["--verbose", "render", "-f", str(document)])
    assert result.exit_code == 0, result.output

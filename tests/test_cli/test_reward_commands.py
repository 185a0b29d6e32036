"""Tests for reward CLI commands."""

from typer.testing import CliRunner

from src.cli.main import app


runner = CliRunner()


class TestDescriptorCommands:
    """Tests for the descriptor sub-commands."""

    def test_parse(self):
        """Should show each parsed reward."""
        result = runner.invoke(app, ["descriptor", "parse", "iron_sword, $5, #arena.vip"])
        assert result.exit_code == 0
        assert "Currency" in result.output
        assert "perm:arena.vip" in result.output

    def test_parse_shortcut(self):
        """Top-level parse should behave like descriptor parse."""
        result = runner.invoke(app, ["parse", "(wool:red:2, $5)"])
        assert result.exit_code == 0
        assert "Group" in result.output

    def test_parse_empty(self):
        """Should say when there is nothing to show."""
        result = runner.invoke(app, ["parse", ""])
        assert result.exit_code == 0
        assert "No rewards" in result.output

    def test_parse_invalid(self):
        """Should report errors and exit non-zero."""
        result = runner.invoke(app, ["descriptor", "parse", "blorp"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_canonical(self):
        """Should print the canonical descriptor."""
        result = runner.invoke(app, ["descriptor", "canonical", "wool:red:5, #a.b, @speed II"])
        assert result.exit_code == 0
        assert result.output.strip() == "wool:1:5, perm:a.b, eff:speed 2"

    def test_canonical_malformed(self):
        """Should reject unbalanced groups."""
        result = runner.invoke(app, ["descriptor", "canonical", "(a, b"])
        assert result.exit_code == 1

    def test_canonical_overflowing_currency(self):
        """Should report an out of range amount as a normal error."""
        result = runner.invoke(app, ["descriptor", "canonical", "$1e999"])
        assert result.exit_code == 1
        assert "out of range" in result.output


class TestFileCommands:
    """Tests for the file sub-commands."""

    def test_check_valid(self, tmp_path):
        """Should accept a file with only valid rewards."""
        path = tmp_path / "r.yaml"
        path.write_text('arenas:\n  - name: a\n    completion: "$5, arrow:3"\n')
        result = runner.invoke(app, ["file", "check", str(path)])
        assert result.exit_code == 0
        assert "1 arenas checked" in result.output

    def test_check_show(self, tmp_path):
        """Should print parsed rewards with --show."""
        path = tmp_path / "r.yaml"
        path.write_text('arenas:\n  - name: a\n    completion: "#arena.vip"\n')
        result = runner.invoke(app, ["file", "check", str(path), "--show"])
        assert result.exit_code == 0
        assert "perm:arena.vip" in result.output

    def test_check_invalid_entries(self, tmp_path):
        """Should list skipped entries and exit non-zero."""
        path = tmp_path / "r.yaml"
        path.write_text('arenas:\n  - name: a\n    completion: "blorp, $5"\n')
        result = runner.invoke(app, ["file", "check", str(path)])
        assert result.exit_code == 1
        assert "Skipped entries" in result.output

    def test_check_strict(self, tmp_path):
        """Should stop at the first bad entry with --strict."""
        path = tmp_path / "r.yaml"
        path.write_text('arenas:\n  - name: a\n    completion: "blorp, $5"\n')
        result = runner.invoke(app, ["file", "check", str(path), "--strict"])
        assert result.exit_code == 1
        assert "Skipped entries" not in result.output

    def test_check_missing_file(self, tmp_path):
        """Should report a missing file."""
        result = runner.invoke(app, ["file", "check", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "not found" in result.output

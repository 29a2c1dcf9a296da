"""Integration tests for the command-line interface."""

from typer.testing import CliRunner

from sculptor import __version__
from sculptor.cli.app import app

runner = CliRunner()


class TestVersion:
    """Tests for the global options."""

    def test_version(self) -> None:
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestStrokeCommand:
    """Tests for `sculptor stroke`."""

    ARGS = ["stroke", "--start", "10,50", "--end", "40,50", "--radius", "6", "--steps", "6"]

    def test_quiet(self) -> None:
        """Test quiet mode prints only the final vertex count."""
        result = runner.invoke(app, [*self.ARGS, "--quiet"])
        assert result.exit_code == 0
        assert result.output.strip().endswith("vertices")

    def test_summary(self) -> None:
        """Test the full summary output."""
        result = runner.invoke(app, self.ARGS)
        assert result.exit_code == 0
        assert "greenyellow" in result.output
        assert "Complete" in result.output
        assert "Inserted" in result.output
        assert "after" in result.output

    def test_log_file(self, tmp_path) -> None:
        """Test detailed logs can be written to a file."""
        log_file = tmp_path / "stroke.log"
        result = runner.invoke(app, [*self.ARGS, "--quiet", "--log-file", str(log_file)])
        assert result.exit_code == 0
        assert log_file.exists()

    def test_zero_min_spacing_clamped(self) -> None:
        """Test a zero minimum spacing is clamped rather than refused."""
        result = runner.invoke(app, [*self.ARGS, "--quiet", "--min-spacing", "0"])
        assert result.exit_code == 0

    def test_nan_min_spacing(self) -> None:
        """Test a NaN minimum spacing is reported as an error."""
        result = runner.invoke(app, [*self.ARGS, "--min-spacing", "nan"])
        assert result.exit_code == 1
        assert "Invalid brush settings" in result.output

    def test_bad_point(self) -> None:
        """Test a malformed point is a usage error."""
        result = runner.invoke(app, ["stroke", "--start", "nowhere"])
        assert result.exit_code == 2


class TestPreviewCommand:
    """Tests for `sculptor preview`."""

    def test_preview(self) -> None:
        """Test radius and hover details are printed."""
        result = runner.invoke(app, ["preview", "95,50", "--size", "10"])
        assert result.exit_code == 0
        assert "model radius" in result.output
        assert "display radius" in result.output
        assert "faded" in result.output

    def test_preview_hover_disabled(self) -> None:
        """Test disabling hover previews."""
        result = runner.invoke(app, ["preview", "95,50", "--no-hover"])
        assert result.exit_code == 0
        assert "disabled" in result.output

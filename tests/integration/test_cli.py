"""Command line tests driven through Typer's test runner."""

import numpy as np
import pytest
from PIL import Image
from typer.testing import CliRunner

from bitmapsdf import __version__
from bitmapsdf.cli.app import app, parse_channels
from bitmapsdf.domain import ChannelRole

runner = CliRunner()


@pytest.fixture
def sprite_path(tmp_path):
    """RGBA sprite with a square alpha mask."""
    pixels = np.zeros((16, 16, 4), dtype=np.uint8)
    pixels[:, :, 0] = 200
    pixels[4:12, 4:12, 3] = 255
    path = tmp_path / "sprite.png"
    Image.fromarray(pixels).save(path)
    return path


class TestConvertCommand:
    """Tests for the convert command."""

    def test_default_output_path(self, sprite_path):
        """Conversion writes {name}-sdf.{ext} next to the input."""
        result = runner.invoke(app, [str(sprite_path), "--size", "32", "--quiet"])

        assert result.exit_code == 0, result.output
        output_path = sprite_path.parent / "sprite-sdf.png"
        with Image.open(output_path) as image:
            assert image.size == (32, 32)
            assert image.mode == "RGBA"

    def test_explicit_output(self, sprite_path, tmp_path):
        """--output overrides the default name."""
        output_path = tmp_path / "field.png"
        result = runner.invoke(app, [str(sprite_path), "-o", str(output_path), "-q"])

        assert result.exit_code == 0, result.output
        assert output_path.exists()

    def test_preserve_rgb(self, sprite_path, tmp_path):
        """Preserve mode keeps size and colour bytes."""
        output_path = tmp_path / "field.png"
        result = runner.invoke(
            app,
            [str(sprite_path), "--mode", "preserve_rgb", "-o", str(output_path), "-q"],
        )

        assert result.exit_code == 0, result.output
        with Image.open(output_path) as image:
            pixels = np.asarray(image)
        assert pixels.shape == (16, 16, 4)
        assert (pixels[:, :, 0] == 200).all()
        assert pixels[8, 8, 3] > 127

    def test_verbose_lists_channels(self, sprite_path, tmp_path):
        """Verbose output prints the channel table."""
        output_path = tmp_path / "field.png"
        result = runner.invoke(app, [str(sprite_path), "-o", str(output_path), "-v"])

        assert result.exit_code == 0, result.output
        assert "alpha" in result.output

    def test_log_file(self, sprite_path, tmp_path):
        """--log-file receives structured records."""
        log_path = tmp_path / "run.log"
        result = runner.invoke(
            app,
            [str(sprite_path), "-o", str(tmp_path / "f.png"), "--log-file", str(log_path), "-q"],
        )

        assert result.exit_code == 0, result.output
        assert "Conversion complete" in log_path.read_text(encoding="utf-8")

    def test_version(self):
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_input(self, tmp_path):
        """A missing input file exits with an error."""
        result = runner.invoke(app, [str(tmp_path / "missing.png")])
        assert result.exit_code == 1

    def test_invalid_mode(self, sprite_path):
        """Unknown modes are rejected before loading."""
        result = runner.invoke(app, [str(sprite_path), "--mode", "stretch"])
        assert result.exit_code == 1

    def test_invalid_distance(self, sprite_path):
        """Non-positive distances fail validation."""
        result = runner.invoke(app, [str(sprite_path), "--distance", "0"])
        assert result.exit_code == 1

    def test_verbose_and_quiet(self, sprite_path):
        """--verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(sprite_path), "-v", "-q"])
        assert result.exit_code == 1

    def test_sixteen_bit_input(self, tmp_path):
        """Wide pixel formats abort the conversion."""
        path = tmp_path / "wide.png"
        Image.new("I;16", (8, 8)).save(path)

        result = runner.invoke(app, [str(path), "-q"])

        assert result.exit_code == 1
        assert not (tmp_path / "wide-sdf.png").exists()

    def test_unreadable_input(self, tmp_path):
        """Files Pillow cannot decode fail to load."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")

        result = runner.invoke(app, [str(path), "-q"])
        assert result.exit_code == 1


class TestParseChannels:
    """Tests for channel list parsing."""

    def test_short_names(self):
        assert parse_channels("r,a") == {ChannelRole.RED, ChannelRole.ALPHA}

    def test_long_names(self):
        assert parse_channels(" Green , blue ") == {ChannelRole.GREEN, ChannelRole.BLUE}

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            parse_channels("x")

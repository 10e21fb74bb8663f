import pytest

from pathtracer.camera import Camera
from pathtracer.config import QUALITY_LEVELS, apply_quality, parse_tile_grid
from pathtracer.errors import ConfigurationError
from pathtracer.geometry import HittableList
from pathtracer.main import main
from pathtracer.scenes import SCENES

FAST = ["--width", "8", "--samples", "1", "--max-depth", "2", "--tiles", "2x2",
        "--executor", "thread", "--seed", "1"]


class TestConfig:

    def test_apply_quality(self):
        cam = apply_quality(Camera(), "draft")
        assert cam.samples_per_pixel == QUALITY_LEVELS["draft"]["samples"]
        assert cam.max_depth == QUALITY_LEVELS["draft"]["bounces"]
        assert cam.image_width == QUALITY_LEVELS["draft"]["width"]

    def test_unknown_quality(self):
        with pytest.raises(ConfigurationError):
            apply_quality(Camera(), "ultra")

    @pytest.mark.parametrize("text,expected", [("4x4", (4, 4)), ("2X8", (2, 8)), ("3", (3, 3))])
    def test_parse_tile_grid(self, text, expected):
        assert parse_tile_grid(text) == expected

    @pytest.mark.parametrize("text", ["", "axb", "0x4", "1x2x3", "-1x2"])
    def test_parse_tile_grid_rejects(self, text):
        with pytest.raises(ConfigurationError):
            parse_tile_grid(text)


class TestScenes:

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_scene_factories(self, name):
        world_factory, camera_factory = SCENES[name]
        world = world_factory()
        assert isinstance(world, HittableList)
        assert len(world) >= 2
        camera_factory().initialize()

    def test_verbose_scene_reports_on_stderr(self, capsys):
        SCENES["default"][0](verbose=True)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Added grey sphere" in captured.err


class TestMain:

    def test_writes_ppm_to_stdout(self, capsys):
        assert main(FAST + ["--quiet"]) == 0
        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert lines[:3] == ["P3", "8 4", "255"]
        assert len(lines) == 3 + 8 * 4
        assert captured.err == ""

    def test_writes_file(self, tmp_path, capsys):
        out = tmp_path / "render.ppm"
        assert main(FAST + ["--scene", "showcase", "--output", str(out)]) == 0
        assert out.read_text().startswith("P3\n8 4\n255\n")
        assert "Done." in capsys.readouterr().err

    def test_reproducible_with_seed(self, capsys):
        main(FAST + ["--quiet"])
        first = capsys.readouterr().out
        main(FAST + ["--quiet"])
        assert capsys.readouterr().out == first

    def test_configuration_error_exit_code(self, capsys):
        assert main(["--samples", "0", "--quiet"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Configuration error" in captured.err

    def test_bad_tile_grid(self, capsys):
        assert main(FAST + ["--tiles", "nope"]) == 2

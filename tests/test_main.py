import pytest
from PIL import Image

import main
from renderer.settings import QUALITY_LEVELS


def small_args(tmp_path, *extra):
    return ["--scene", "two_spheres", "--width", "8", "--aspect", "2",
            "--samples", "1", "--depth", "2", "--seed", "1",
            "--output", str(tmp_path / "img.png"), *extra]


def test_main_renders_and_saves(tmp_path, capsys):
    assert main.main(small_args(tmp_path)) == 0
    with Image.open(tmp_path / "img.png") as img:
        assert img.size == (8, 4)
    out = capsys.readouterr().out
    assert "=== Rendering ===" in out
    assert "Saved" in out


def test_main_reports_configuration_errors(tmp_path, capsys):
    assert main.main(small_args(tmp_path, "--workers", "0")) == 2
    assert "Error:" in capsys.readouterr().err
    assert not (tmp_path / "img.png").exists()


def test_main_reports_missing_texture(tmp_path):
    args = ["--scene", "earth", "--width", "4", "--samples", "1",
            "--texture", str(tmp_path / "nope.png"), "--output", str(tmp_path / "e.png")]
    assert main.main(args) == 2


def test_quality_preset_and_overrides():
    settings = main.parse_args(["--quality", "draft"])
    assert settings.samples_per_pixel == QUALITY_LEVELS["draft"]["samples"]
    assert settings.max_depth == QUALITY_LEVELS["draft"]["bounces"]

    settings = main.parse_args(["--quality", "draft", "--samples", "3"])
    assert settings.samples_per_pixel == 3
    assert settings.max_depth == QUALITY_LEVELS["draft"]["bounces"]


def test_defaults():
    settings = main.parse_args([])
    assert settings.scene == "random"
    assert settings.tone_map == "gamma"
    assert settings.workers == 1
    assert not settings.preview


def test_unknown_scene_is_rejected_by_the_parser():
    with pytest.raises(SystemExit):
        main.parse_args(["--scene", "nowhere"])


def test_unwritable_output_format_fails_before_rendering(tmp_path, capsys):
    args = small_args(tmp_path)
    args[args.index("--output") + 1] = str(tmp_path / "img.xyz")
    assert main.main(args) == 2
    captured = capsys.readouterr()
    assert "Error:" in captured.err
    assert "=== Rendering ===" not in captured.out

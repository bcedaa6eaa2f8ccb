from pathlib import Path

from svg2puml.naming import plan_job, sprite_identifier, strip_extension


def test_identifier_replaces_separators_and_punctuation():
    assert sprite_identifier(Path("icons") / "ok.svg") == "icons_ok"
    assert sprite_identifier("aws/compute-ec2 v2.svg") == "aws_compute_ec2_v2"


def test_identifier_strips_extension_case_insensitively():
    assert sprite_identifier("Logo.SVG") == "Logo"


def test_identifier_is_deterministic():
    path = Path("a") / "b" / "c.d.svg"
    assert sprite_identifier(path) == sprite_identifier(path) == "a_b_c_d"


def test_identifiers_can_collide():
    assert sprite_identifier(Path("a") / "b.svg") == sprite_identifier("a_b.svg")


def test_strip_extension_leaves_other_names():
    assert strip_extension("readme.txt", ".svg") == "readme.txt"


def test_plan_job_mirrors_tree(tmp_path):
    input_root = tmp_path / "in"
    output_root = tmp_path / "out"
    source = input_root / "icons" / "small" / "Star.SVG"

    job = plan_job(input_root, output_root, source, {})

    assert job.relative_path == Path("icons") / "small" / "Star.SVG"
    assert job.target_dir == output_root / "icons" / "small"
    assert job.raster_path == output_root / "icons" / "small" / "Star.png"
    assert job.sprite_path == output_root / "icons" / "small" / "Star.puml"
    assert job.identifier == "icons_small_Star"


def test_plan_job_uses_configured_extensions(tmp_path):
    config = {"output": {"sprite_extension": ".iuml", "raster_extension": ".tmp.png"}}
    job = plan_job(tmp_path, tmp_path / "out", tmp_path / "x.svg", config)
    assert job.sprite_path.name == "x.iuml"
    assert job.raster_path.name == "x.tmp.png"

import pytest

from unionlayer.paths import Layers


@pytest.fixture
def layers(tmp_path):
    lower = tmp_path / "lower"
    upper = tmp_path / "upper"
    lower.mkdir()
    upper.mkdir()
    return Layers(str(lower), str(upper))


def test_upper_and_lower_concatenate(layers):
    assert layers.upper("/a.txt") == layers.upper_dir + "/a.txt"
    assert layers.lower("/d/a.txt") == layers.lower_dir + "/d/a.txt"


def test_whiteout_root_file(layers):
    assert layers.whiteout("/file.txt") == layers.upper_dir + "/.wh.file.txt"


def test_whiteout_nested_file(layers):
    assert layers.whiteout("/dir/file.txt") == layers.upper_dir + "/dir/.wh.file.txt"


def test_whiteout_requires_absolute_path(layers):
    with pytest.raises(ValueError):
        layers.whiteout("file.txt")


def test_resolve_prefers_upper(layers, tmp_path):
    (tmp_path / "lower" / "f").write_text("lower")
    (tmp_path / "upper" / "f").write_text("upper")
    assert layers.resolve("/f") == layers.upper("/f")


def test_resolve_falls_back_to_lower(layers, tmp_path):
    (tmp_path / "lower" / "f").write_text("lower")
    assert layers.resolve("/f") == layers.lower("/f")


def test_resolve_hidden_by_whiteout(layers, tmp_path):
    (tmp_path / "lower" / "f").write_text("lower")
    (tmp_path / "upper" / "f").write_text("upper")
    (tmp_path / "upper" / ".wh.f").write_text("")
    with pytest.raises(FileNotFoundError):
        layers.resolve("/f")


def test_resolve_missing(layers):
    with pytest.raises(FileNotFoundError):
        layers.resolve("/nothing")


def test_resolve_nested_whiteout_only_affects_its_directory(layers, tmp_path):
    (tmp_path / "lower" / "d").mkdir()
    (tmp_path / "lower" / "d" / "f").write_text("x")
    (tmp_path / "upper" / ".wh.f").write_text("")
    assert layers.resolve("/d/f") == layers.lower("/d/f")
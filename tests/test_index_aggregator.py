import pytest

from svg2puml.errors import DirectoryError
from svg2puml.output.index_aggregator import IndexAggregator


@pytest.fixture
def aggregator():
    return IndexAggregator({})


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("@startuml\n@enduml\n")


def test_lists_sorted_sprites_relative_to_root(aggregator, tmp_path):
    touch(tmp_path / "zeta.puml")
    touch(tmp_path / "icons" / "ok.puml")
    touch(tmp_path / "icons" / "arrows" / "up.PUML")
    touch(tmp_path / "icons" / "ok.png")

    assert aggregator.collect(tmp_path) == [
        "icons/arrows/up.PUML",
        "icons/ok.puml",
        "zeta.puml",
    ]


def test_index_excludes_itself(aggregator, tmp_path):
    touch(tmp_path / "icons" / "ok.puml")
    aggregator.aggregate(tmp_path)
    index_path = aggregator.aggregate(tmp_path)

    text = index_path.read_text(encoding="utf-8")
    assert index_path.name == "all_sprites.puml"
    assert text.count("!include") == 1


def test_index_document_format(aggregator, tmp_path):
    touch(tmp_path / "a" / "one.puml")
    touch(tmp_path / "b" / "two.puml")

    text = aggregator.aggregate(tmp_path).read_text(encoding="utf-8")

    assert text == (
        "@startuml\n"
        "' Index file for all generated sprites\n"
        "\n"
        "!include a/one.puml\n"
        "!include b/two.puml\n"
        "\n"
        "@enduml\n"
    )


def test_nested_file_named_like_index_is_included(aggregator, tmp_path):
    touch(tmp_path / "sub" / "all_sprites.puml")
    assert aggregator.collect(tmp_path) == ["sub/all_sprites.puml"]


def test_missing_root_raises_directory_error(aggregator, tmp_path):
    with pytest.raises(DirectoryError):
        aggregator.aggregate(tmp_path / "missing")

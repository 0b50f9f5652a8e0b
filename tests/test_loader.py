"""Tests for loading productions from YAML."""

import pytest

from proscenium.core import LayoutCursor, Stage
from proscenium.directors import HORIZONTALLY, MAGICALLY, VERTICALLY
from proscenium.layout import ProductionLoader, parse_margins, parse_stage
from proscenium.render import Block, BlockPerformer, ButtonPerformer

BUILTIN_PRODUCTIONS = ["blocks", "buttons", "sidebar", "toolbar"]

BUTTONS_YAML = """
name: demo
stage: [0, 60, 0, 20]
margins: {horizontal: 2, vertical: 1}
director: vertical
items:
  - First
  - 42
"""


def test_load_string():
    production = ProductionLoader().load_string(BUTTONS_YAML)

    assert production.name == "demo"
    assert production.stage == Stage(0, 60, 0, 20)
    assert production.cursor == LayoutCursor(horizontal_margin=2, vertical_margin=1)
    assert production.director is VERTICALLY
    assert isinstance(production.performer, ButtonPerformer)
    assert production.items == ["First", "42"]


def test_defaults():
    production = ProductionLoader().load_string("stage: {left: 1, right: 2, top: 3, bottom: 4}")

    assert production.name == "production"
    assert production.stage == Stage(1, 2, 3, 4)
    assert production.cursor == LayoutCursor()
    assert production.director is MAGICALLY
    assert production.items == []


def test_block_items():
    production = ProductionLoader().load_string(
        """
stage: [0, 30, 0, 10]
director: horizontal
performer: block
items:
  - {width: 5, height: 2}
  - {width: 3, height: 4, fill: "*"}
"""
    )

    assert production.director is HORIZONTALLY
    assert isinstance(production.performer, BlockPerformer)
    assert production.items == [Block(5, 2), Block(3, 4, fill="*")]


def test_performer_params():
    production = ProductionLoader().load_string(
        "stage: [0, 10, 0, 10]\nperformer_params: {border_size: 2}"
    )
    assert production.performer == ButtonPerformer(border_size=2)


def test_load_file_uses_stem_as_default_name(tmp_path):
    path = tmp_path / "menu.yaml"
    path.write_text("stage: [0, 10, 0, 10]\nitems: [a, b]\n")

    production = ProductionLoader().load(path)

    assert production.name == "menu"
    assert production.items == ["a", "b"]


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        ProductionLoader().load("/nonexistent/production.yaml")


@pytest.mark.parametrize("name", BUILTIN_PRODUCTIONS)
def test_builtin_productions_load(name):
    loader = ProductionLoader()
    production = loader.load_named(name)

    assert production.name == name
    assert len(production.items) > 0


def test_available_lists_builtins():
    assert ProductionLoader().available() == BUILTIN_PRODUCTIONS


def test_load_named_searches_paths(tmp_path):
    (tmp_path / "custom.yaml").write_text("stage: [0, 5, 0, 5]\n")
    loader = ProductionLoader(search_paths=[tmp_path])

    assert loader.available() == ["custom"]
    assert loader.load_named("custom").stage == Stage(0, 5, 0, 5)
    with pytest.raises(FileNotFoundError, match="buttons"):
        loader.load_named("buttons")


@pytest.mark.parametrize(
    "yaml_string,message",
    [
        ("- not a mapping", "must be a mapping"),
        ("name: nostage", "requires a 'stage'"),
        ("stage: [0, 1, 2]", "Stage must be"),
        ("stage: {left: 0, right: 1}", "missing edges: top, bottom"),
        ("stage: [0, 1, 0, 1]\ndirector: diagonal", "Unknown director"),
        ("stage: [0, 1, 0, 1]\nperformer: sprite", "Unknown performer type"),
        ("stage: [0, 1, 0, 1]\nitems: First", "'items' must be a list"),
        ("stage: [0, 1, 0, 1]\nperformer: block\nitems: [{width: 1}]", "'width' and 'height'"),
        ("stage: [0, 1, 0, 1]\nmargins: [1, 2, 3]", "Margins must be"),
    ],
)
def test_invalid_productions(yaml_string, message):
    with pytest.raises(ValueError, match=message):
        ProductionLoader().load_string(yaml_string)


def test_parse_helpers():
    assert parse_stage((0, 4, 1, 3)) == Stage(0, 4, 1, 3)
    assert parse_margins([1, 2]) == LayoutCursor(horizontal_margin=1, vertical_margin=2)
    assert parse_margins(None) == LayoutCursor()

"""YAML loader for production definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.stage import LayoutCursor, Stage
from ..directors import Director, get_director
from ..render.block import Block, BlockPerformer
from ..render.button import ButtonPerformer

# Registry of available performers
PERFORMERS = {
    "button": ButtonPerformer,
    "block": BlockPerformer,
}

STAGE_EDGES = ("left", "right", "top", "bottom")


@dataclass
class ProductionSpec:
    """Everything needed to run one negotiation.

    Attributes:
        name: Production name
        stage: The stage shared by all items
        cursor: Initial layout state (margins set, offsets zero)
        director: Stacking policy
        performer: Resolves items into placements
        items: Content to place, in order
    """

    name: str
    stage: Stage
    cursor: LayoutCursor
    director: Director
    performer: Any
    items: list[Any] = field(default_factory=list)


def parse_stage(data: Any) -> Stage:
    """Parse a stage from a [left, right, top, bottom] list or an edge mapping."""
    if isinstance(data, dict):
        missing = [edge for edge in STAGE_EDGES if edge not in data]
        if missing:
            raise ValueError(f"Stage is missing edges: {', '.join(missing)}")
        return Stage(*(float(data[edge]) for edge in STAGE_EDGES))

    if isinstance(data, (list, tuple)) and len(data) == 4:
        return Stage(*(float(value) for value in data))

    raise ValueError(f"Stage must be [left, right, top, bottom] or a mapping, got {data!r}")


def parse_margins(data: Any) -> LayoutCursor:
    """Parse margins into a fresh cursor."""
    data = data or {}
    if isinstance(data, (list, tuple)):
        if len(data) != 2:
            raise ValueError(f"Margins must be [horizontal, vertical], got {data!r}")
        horizontal, vertical = data
    elif isinstance(data, dict):
        horizontal = data.get("horizontal", 0.0)
        vertical = data.get("vertical", 0.0)
    else:
        raise ValueError(f"Margins must be a mapping or [horizontal, vertical], got {data!r}")

    return LayoutCursor(
        horizontal_margin=float(horizontal),
        vertical_margin=float(vertical),
    )


class ProductionLoader:
    """Loads production definitions from YAML files.

    YAML format:
    ```yaml
    name: buttons
    stage: [0, 60, 0, 20]          # or {left: 0, right: 60, top: 0, bottom: 20}
    margins: {horizontal: 0, vertical: 0}
    director: adaptive             # horizontal | vertical | adaptive
    performer: button              # button | block
    items:
      - First
      - Second button
    ```

    Block productions list items as mappings:
    ```yaml
    performer: block
    items:
      - {width: 10, height: 4, fill: "#"}
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories searched by ``load_named()``.
                          Defaults to the bundled ``assets/`` directory.
        """
        if search_paths is None:
            self.search_paths = [Path(__file__).parent.parent / "assets"]
        else:
            self.search_paths = [Path(path) for path in search_paths]

    def load(self, path: str | Path) -> ProductionSpec:
        """Load a production from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML format is invalid
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_production(data, default_name=path.stem)

    def load_string(self, yaml_string: str) -> ProductionSpec:
        """Load a production from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._parse_production(data)

    def load_named(self, name: str) -> ProductionSpec:
        """Load a production by name, searching for {name}.yaml in search paths."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return self.load(yaml_path)
        raise FileNotFoundError(
            f"Production '{name}' not found in search paths: {self.search_paths}"
        )

    def available(self) -> list[str]:
        """List the production names found in the search paths."""
        names = set()
        for search_path in self.search_paths:
            if search_path.is_dir():
                names.update(path.stem for path in search_path.glob("*.yaml"))
        return sorted(names)

    def _parse_production(
        self, data: dict[str, Any] | None, default_name: str = "production"
    ) -> ProductionSpec:
        if not isinstance(data, dict):
            raise ValueError("Production definition must be a mapping")
        if "stage" not in data:
            raise ValueError("Production definition requires a 'stage'")

        performer_name = data.get("performer", "button")
        performer_class = PERFORMERS.get(performer_name)
        if performer_class is None:
            raise ValueError(f"Unknown performer type: {performer_name}")

        items = data.get("items") or []
        if not isinstance(items, list):
            raise ValueError("'items' must be a list")
        if performer_name == "block":
            items = [self._parse_block(item) for item in items]
        else:
            items = [str(item) for item in items]

        return ProductionSpec(
            name=data.get("name", default_name),
            stage=parse_stage(data["stage"]),
            cursor=parse_margins(data.get("margins")),
            director=get_director(data.get("director", "adaptive")),
            performer=performer_class(**data.get("performer_params", {})),
            items=items,
        )

    def _parse_block(self, data: Any) -> Block:
        if not isinstance(data, dict) or "width" not in data or "height" not in data:
            raise ValueError(f"Block items need 'width' and 'height', got {data!r}")
        return Block(
            width=float(data["width"]),
            height=float(data["height"]),
            fill=str(data.get("fill", "#")),
        )

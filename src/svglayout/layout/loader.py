"""YAML loader for diagram definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..core.bounded import Bounded
from ..core.errors import ConfigurationError
from ..core.geometry import Point
from ..shapes.primitives import Circle, Line, Rect, Square
from ..shapes.text import Text
from ..styles.style import Style
from ..styles.theme import BUILTIN_THEMES, Theme, ThemeLoader
from .artboard import Artboard
from .columns import Columns
from .container import Container
from .grid import Grid
from .stack import HStack, VStack
from .zstack import ZStack

logger = logging.getLogger(__name__)


# Registry of element types available in diagram files
ELEMENT_REGISTRY: dict[str, type[Bounded]] = {
    "group": Container,
    "hstack": HStack,
    "vstack": VStack,
    "zstack": ZStack,
    "grid": Grid,
    "columns": Columns,
    "rect": Rect,
    "square": Square,
    "circle": Circle,
    "line": Line,
    "text": Text,
}

# Keys handled by the loader rather than passed to constructors
_STRUCTURAL_KEYS = {"type", "children", "cell", "column", "style", "position", "rotate", "translate"}


def _pair(value: Any, what: str, node: str | None) -> tuple[Any, Any]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return value[0], value[1]
    raise ConfigurationError(f"{what} must be a pair of values, got {value!r}", node=node)


class DiagramLoader:
    """Builds an Artboard from a YAML diagram definition.

    YAML format:
    ```yaml
    artboard:
      width: 600
      height: auto
      padding: 20
    theme: default
    children:
      - type: vstack
        name: menu
        spacing: 10
        style: panel            # a theme style name or a mapping
        children:
          - {type: rect, width: 120, height: 40}
          - {type: text, content: "Quit"}
      - type: grid
        columns: 3
        cell_width: 110
        cell_height: 110
        children:
          - {type: circle, radius: 35, cell: [1, 1]}
      - type: text
        content: "Title"
        position:
          anchor: bottom_center   # point on this node (content box by default)
          to: {node: menu, point: top_center, box: margin}
          offset: [0, -8]
        rotate: 15                # or {degrees: 15, pivot: [x, y]}
    ```

    The tree is built first. Explicit ``position``, ``rotate`` and
    ``translate`` settings are applied in a second pass, after a layout run,
    so they can refer to points of other nodes by name.
    """

    def __init__(self, theme_loader: ThemeLoader | None = None) -> None:
        self._theme_loader = theme_loader

    def load(self, path: str | Path) -> Artboard:
        """Load a diagram from a YAML file.

        Themes are looked up next to the file first, then among the built-in ones.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)
        theme_loader = self._theme_loader or ThemeLoader([path.parent, BUILTIN_THEMES])
        return self._build(data, theme_loader)

    def load_string(self, yaml_string: str) -> Artboard:
        """Load a diagram from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._build(data, self._theme_loader or ThemeLoader())

    def _build(self, data: Any, theme_loader: ThemeLoader) -> Artboard:
        if not isinstance(data, Mapping):
            raise ConfigurationError("A diagram must be a mapping")
        board_args = dict(data.get("artboard") or {})
        theme_name = data.get("theme", board_args.pop("theme", None))
        theme = theme_loader.load(theme_name) if theme_name else None
        board = Artboard(theme=theme, **board_args)

        nodes: dict[str, Bounded] = {board.name: board}
        deferred: list[tuple[Bounded, dict[str, Any]]] = []

        # First pass: build the tree
        for child_def in data.get("children") or []:
            self._build_node(child_def, board, theme, nodes, deferred)

        # Second pass: explicit positions and transforms
        for node, node_def in deferred:
            board.layout()
            self._apply_placement(node, node_def, nodes)

        logger.debug("Loaded diagram with %d nodes", len(nodes))
        return board

    def _build_node(
        self,
        node_def: Any,
        parent: Container,
        theme: Theme | None,
        nodes: dict[str, Bounded],
        deferred: list[tuple[Bounded, dict[str, Any]]],
    ) -> Bounded:
        if not isinstance(node_def, Mapping) or "type" not in node_def:
            raise ConfigurationError(f"Diagram node needs a 'type': {node_def!r}")
        type_name = node_def["type"]
        element_class = ELEMENT_REGISTRY.get(type_name)
        if element_class is None:
            raise ConfigurationError(
                f"Unknown element type: {type_name!r} (known: {sorted(ELEMENT_REGISTRY)})"
            )

        kwargs = {key: value for key, value in node_def.items() if key not in _STRUCTURAL_KEYS}
        if "style" in node_def:
            kwargs["style"] = self._resolve_style(node_def["style"], theme)
        try:
            node = element_class(auto_attach=False, **kwargs)
        except TypeError as exc:
            raise ConfigurationError(
                f"Invalid settings for {type_name}: {exc}", node=kwargs.get("name")
            ) from exc

        if node.name in nodes:
            raise ConfigurationError("Duplicate node name", node=node.name)
        nodes[node.name] = node
        self._attach(node, node_def, parent)

        children = node_def.get("children") or []
        if children and not isinstance(node, Container):
            raise ConfigurationError(f"{type_name} cannot have children", node=node.name)
        for child_def in children:
            self._build_node(child_def, node, theme, nodes, deferred)

        if any(key in node_def for key in ("position", "rotate", "translate")):
            deferred.append((node, dict(node_def)))
        return node

    def _attach(self, node: Bounded, node_def: Mapping[str, Any], parent: Container) -> None:
        if "cell" in node_def:
            if not isinstance(parent, Grid):
                raise ConfigurationError("'cell' is only valid inside a grid", node=node.name)
            row, column = _pair(node_def["cell"], "cell", node.name)
            parent.add(node, row=row, column=column)
        elif "column" in node_def:
            if not isinstance(parent, Columns):
                raise ConfigurationError("'column' is only valid inside columns", node=node.name)
            parent.add(node, column=node_def["column"])
        else:
            parent.add(node)

    def _resolve_style(self, value: Any, theme: Theme | None) -> Style:
        if isinstance(value, str):
            if theme is None:
                raise ConfigurationError(f"Style {value!r} used without a theme")
            return theme.style(value)
        return Style.coerce(value)

    def _resolve_point(self, ref: Any, nodes: dict[str, Bounded]) -> Point:
        """A literal [x, y] or a {node, point, box} reference."""
        if isinstance(ref, Mapping):
            name = ref.get("node")
            if name not in nodes:
                raise ConfigurationError(f"Unknown node {name!r} in point reference")
            return nodes[name].get_point(ref.get("box", "content"), ref.get("point", "center"))
        if isinstance(ref, (list, tuple)) and len(ref) == 2:
            return Point(float(ref[0]), float(ref[1]))
        raise ConfigurationError(f"Invalid point: {ref!r}")

    def _apply_placement(
        self, node: Bounded, node_def: Mapping[str, Any], nodes: dict[str, Bounded]
    ) -> None:
        position = node_def.get("position")
        if position is not None:
            if not isinstance(position, Mapping):
                raise ConfigurationError(
                    f"position must be a mapping, got {position!r}", node=node.name
                )
            anchor = node.get_point(position.get("box", "content"), position.get("anchor", "center"))
            if "to" in position:
                target = self._resolve_point(position["to"], nodes)
            elif "at" in position:
                target = self._resolve_point(position["at"], nodes)
            else:
                raise ConfigurationError("position needs 'to' or 'at'", node=node.name)
            dx, dy = _pair(position.get("offset", (0, 0)), "offset", node.name)
            node.position(anchor, target, x=dx, y=dy)

        rotate = node_def.get("rotate")
        if rotate is not None:
            if isinstance(rotate, Mapping):
                if "degrees" not in rotate:
                    raise ConfigurationError("rotate needs 'degrees'", node=node.name)
                pivot = rotate.get("pivot")
                node.rotate(
                    rotate["degrees"],
                    pivot=None if pivot is None else self._resolve_point(pivot, nodes),
                )
            else:
                node.rotate(rotate)

        translate = node_def.get("translate")
        if translate is not None:
            if isinstance(translate, Mapping):
                unknown = set(translate) - {"dx", "dy", "along", "distance"}
                if unknown:
                    raise ConfigurationError(
                        f"Unknown translate settings: {sorted(unknown)}", node=node.name
                    )
                node.translate(**translate)
            else:
                node.translate(*_pair(translate, "translate", node.name))

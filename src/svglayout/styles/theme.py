"""Load named styles from YAML theme files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import ConfigurationError
from .style import Style

# Themes shipped with the package
BUILTIN_THEMES = Path(__file__).parent / "themes"


@dataclass
class Theme:
    """A set of named styles.

    Attributes:
        name: Theme identifier
        styles: Style per name (e.g. "box", "accent", "cell")
        background: Canvas background color, if any
    """

    name: str
    styles: dict[str, Style] = field(default_factory=dict)
    background: str | None = None

    def style(self, name: str) -> Style:
        """Look up a named style.

        Raises:
            ConfigurationError: If the theme has no style of that name
        """
        try:
            return self.styles[name]
        except KeyError:
            raise ConfigurationError(
                f"Theme '{self.name}' has no style '{name}' (available: {sorted(self.styles)})"
            ) from None


class ThemeLoader:
    """Loads theme definitions from YAML files.

    YAML format:
    ```yaml
    name: default
    background: "#ffffff"
    styles:
      box:
        fill: "#e8eef7"
        stroke: "#34495e"
        stroke_width: 1.5
      accent:
        fill: "#e67e22"
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for theme YAML files.
                          Defaults to the themes shipped with the package.
        """
        self.search_paths = search_paths if search_paths is not None else [BUILTIN_THEMES]
        self._cache: dict[str, Theme] = {}

    def load(self, name: str) -> Theme:
        """Load a theme by name.

        Searches for {name}.yaml in the search paths.

        Raises:
            FileNotFoundError: If the theme YAML is not found
            ConfigurationError: If the YAML format is invalid
        """
        if name in self._cache:
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Theme '{name}' not found in search paths: {self.search_paths}"
            )

        with open(yaml_path) as f:
            data = yaml.safe_load(f)
        theme = self.parse(data, default_name=name)
        self._cache[name] = theme
        return theme

    def _find_yaml(self, name: str) -> Path | None:
        for search_path in self.search_paths:
            yaml_path = Path(search_path) / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    @staticmethod
    def parse(data: Any, default_name: str = "unnamed") -> Theme:
        """Parse a theme definition from YAML data."""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Theme '{default_name}' must be a mapping")
        styles_data = data.get("styles", {}) or {}
        if not isinstance(styles_data, dict):
            raise ConfigurationError(f"Theme '{default_name}': 'styles' must be a mapping")
        return Theme(
            name=data.get("name", default_name),
            styles={key: Style.coerce(value) for key, value in styles_data.items()},
            background=data.get("background"),
        )

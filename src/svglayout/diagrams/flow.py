"""A diagram defined in YAML."""

from pathlib import Path

from ..layout import Artboard, DiagramLoader


def create_flow_diagram() -> Artboard:
    return DiagramLoader().load(Path(__file__).parent / "flow.yaml")

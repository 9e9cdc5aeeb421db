"""Pre-built diagrams."""

from .columns import create_columns_diagram
from .construction import create_construction_diagram
from .flow import create_flow_diagram
from .grid import create_grid_diagram
from .spread import create_spread_diagram
from .stack import create_stack_diagram

__all__ = [
    "create_stack_diagram",
    "create_grid_diagram",
    "create_columns_diagram",
    "create_spread_diagram",
    "create_construction_diagram",
    "create_flow_diagram",
]

"""Containers and the layout algorithms they implement."""

from .artboard import Artboard
from .columns import Column, Columns
from .container import Container
from .grid import Grid, GridCell
from .loader import DiagramLoader
from .stack import HStack, Stack, VStack
from .zstack import ZStack

__all__ = [
    "Artboard",
    "Container",
    "Stack",
    "HStack",
    "VStack",
    "ZStack",
    "Grid",
    "GridCell",
    "Columns",
    "Column",
    "DiagramLoader",
]

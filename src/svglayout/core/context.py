"""The ambient root that newly constructed elements attach to.

The slot is a context variable rather than a module global: entering a root
(``with Artboard(...) as board:``) sets it and leaving restores whatever was
active before, so nested or interleaved diagrams never cross-attach. Outside
of any ``with`` block nothing is attached automatically.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..layout.container import Container

_active_root: ContextVar[Container | None] = ContextVar("svglayout_active_root", default=None)


def current_root() -> Container | None:
    """The root new elements auto-attach to, or None."""
    return _active_root.get()


@contextmanager
def active_root(root: Container | None) -> Iterator[Container | None]:
    """Make ``root`` the auto-attach target for the duration of the block."""
    token = _active_root.set(root)
    try:
        yield root
    finally:
        _active_root.reset(token)

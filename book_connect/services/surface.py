"""
In-memory presentation surface: named mount points the render adapter and the
router write to, and the Streamlit components read from.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from book_connect.utils.errors import MountPointError

MOUNT_POINTS = (
    "header-search",
    "header-settings",
    "list-items",
    "list-message",
    "list-button",
    "list-active",
    "list-blur",
    "list-image",
    "list-title",
    "list-subtitle",
    "list-description",
    "search-overlay",
    "search-form",
    "search-title",
    "search-genres",
    "search-authors",
    "settings-overlay",
    "settings-form",
    "settings-theme",
)


@dataclass
class MountPoint:
    name: str
    children: List[Any] = field(default_factory=list)
    text: str = ""
    value: str = ""
    src: str = ""
    open: bool = False
    classes: Set[str] = field(default_factory=set)

    def append(self, items: List[Any]) -> None:
        self.children.extend(items)

    def clear(self) -> None:
        self.children = []

    def toggle_class(self, name: str, force: bool) -> None:
        if force:
            self.classes.add(name)
        else:
            self.classes.discard(name)


@dataclass
class Surface:
    mounts: Dict[str, MountPoint] = field(default_factory=dict)
    style: Dict[str, str] = field(default_factory=dict)
    focus: Optional[str] = None
    scroll_to_top: bool = False

    @classmethod
    def create(cls, names=MOUNT_POINTS) -> "Surface":
        return cls(mounts={n: MountPoint(n) for n in names})

    def query(self, name: str) -> MountPoint:
        try:
            return self.mounts[name]
        except KeyError:
            raise MountPointError(f"No mount point named '{name}'") from None

    def set_property(self, name: str, value: str) -> None:
        self.style[name] = value

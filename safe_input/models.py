from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ComponentRole(Enum):
    """How a path component is treated by the path sanitizer."""

    NAVIGATION = "navigation"
    DIRECTORY = "directory"
    FILE = "file"


@dataclass
class PathComponent:
    """One slash-delimited segment of a path being sanitized."""

    index: int
    raw: str
    role: ComponentRole
    sanitized: Optional[str] = None
    error: Optional[str] = None

    @property
    def dropped(self) -> bool:
        """Return True if the component failed sanitization and was removed."""
        return self.sanitized is None


@dataclass
class PathReport:
    """Result of a path sanitization, with the per-component breakdown."""

    path: str
    components: list[PathComponent] = field(default_factory=list)

    @property
    def dropped(self) -> list[PathComponent]:
        return [c for c in self.components if c.dropped]

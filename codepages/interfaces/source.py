"""Source document interfaces."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """A source file discovered for publishing.

    Attributes:
        name: File name without its extension; names the output page.
        path: Location of the file on disk.
    """

    name: str
    path: Path


@dataclass
class BuildReport:
    """Outcome of a site build.

    Attributes:
        version: Version stamp shared by every page of the build.
        written: Paths of the pages written successfully.
        failed: Path of each page that could not be produced, with the error.
    """

    version: str
    written: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every page was written."""
        return not self.failed

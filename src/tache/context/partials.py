"""Partial resolvers."""

from collections.abc import Mapping
from pathlib import Path

DEFAULT_EXTENSION = ".mustache"


class PartialMap:
    """Resolve partials from a fixed mapping of name to template text."""

    def __init__(self, partials: Mapping[str, str]) -> None:
        """Initialize with a mapping of partial name to template."""
        self.partials = dict(partials)

    def get_partial(self, name: str) -> str:
        """Return the partial ``name``, or "" when it is not in the map."""
        return self.partials.get(name, "")


class PartialFileLoader:
    """Load partials from ``<base_path>/<name><extension>`` files.

    Each partial is read once and cached. Files that cannot be read resolve
    to an empty template, and that result is cached as well.
    """

    def __init__(
        self, base_path: str | Path, *, extension: str = DEFAULT_EXTENSION
    ) -> None:
        """Initialize the loader.

        Args:
            base_path: Directory containing partial files
            extension: Suffix appended to partial names (default ".mustache")

        """
        self.base_path = Path(base_path)
        self.extension = extension
        self._cache: dict[str, str] = {}

    def path_for(self, name: str) -> Path:
        """Return the file path a partial name maps to."""
        return self.base_path / f"{name}{self.extension}"

    def get_partial(self, name: str) -> str:
        """Return the partial ``name``, reading it on first use."""
        if name not in self._cache:
            try:
                self._cache[name] = self.path_for(name).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                self._cache[name] = ""
        return self._cache[name]

"""Collision resolution for artifacts whose target file already exists.

Instead of overwriting, the resolver picks the first free name in the
sequence ``<name>Copy``, ``<name>Copy2``, ``<name>Copy3``, ... in the same
directory, then rewrites the rendered source so it refers to itself by the
new name.
"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from ..utils import get_logger
from .writer import ArtifactWriter

logger = get_logger(__name__)

COPY_SUFFIX = "Copy"


class ResolvedName(NamedTuple):
    path: Path
    name: str


def copy_suffix(counter: int) -> str:
    """``Copy`` for the first attempt, ``Copy<counter>`` afterwards."""
    return COPY_SUFFIX if counter == 1 else f"{COPY_SUFFIX}{counter}"


class CollisionResolver:
    """Finds a non-colliding name/path pair for an artifact."""

    def __init__(self, writer: ArtifactWriter | None = None) -> None:
        self.writer = writer or ArtifactWriter()

    def resolve(self, original_name: str, path: str | Path) -> ResolvedName:
        """Return the first ``Copy``-suffixed candidate that does not exist.

        Args:
            original_name: Name used inside the artifact (e.g. ``SongController``).
            path: The colliding target path.  The candidate keeps its
                directory and extension; only the file stem gains the suffix.

        Returns:
            ``(candidate_path, candidate_name)``.  The loop runs once per
            pre-existing copy, so it always terminates.
        """
        original = Path(path)
        stem, extension = original.stem, original.suffix
        counter = 1
        while True:
            suffix = copy_suffix(counter)
            candidate = original.with_name(f"{stem}{suffix}{extension}")
            if not self.writer.exists(candidate):
                logger.debug("Resolved %s -> %s after %d attempt(s)", original, candidate, counter)
                return ResolvedName(candidate, f"{original_name}{suffix}")
            counter += 1

    @staticmethod
    def rewrite(content: str, original_name: str, resolved_name: str) -> str:
        """Replace every occurrence of *original_name* with *resolved_name*.

        This is plain substring replacement: an identifier that merely
        contains *original_name* (``SongService`` for ``Song``) is rewritten
        too.
        """
        if not original_name:
            return content
        return content.replace(original_name, resolved_name)

"""Filesystem access for generated artifacts.

``ArtifactWriter.write`` is the only mutating primitive in the engine; every
generator funnels its output through it.  Nothing here locks between an
:meth:`ArtifactWriter.exists` probe and the following write, so two processes
creating the same artifact concurrently can both miss the collision.
"""

from __future__ import annotations

from pathlib import Path

from ..utils import get_logger

logger = get_logger(__name__)


class ArtifactWriter:
    """Composes target paths and writes artifact files under a project root."""

    encoding = "utf-8"

    @staticmethod
    def resolve_target_path(
        root: str | Path,
        relative_subdir: str | Path,
        artifact_name: str,
        extension: str,
    ) -> Path:
        """Return ``<root>/<relative_subdir>/<artifact_name><extension>``.

        Pure path composition: the result is made absolute but nothing on
        disk is touched.
        """
        if extension and not extension.startswith("."):
            extension = "." + extension
        return Path(root).absolute() / relative_subdir / f"{artifact_name}{extension}"

    @staticmethod
    def exists(path: str | Path) -> bool:
        return Path(path).exists()

    @staticmethod
    def ensure_directory(path: str | Path) -> Path:
        """Create *path* and any missing parents.  No-op when present."""
        dir_path = Path(path)
        dir_path.mkdir(parents=True, exist_ok=True)
        return dir_path

    def write(self, path: str | Path, content: str) -> Path:
        """Create or overwrite the file at *path* with *content*.

        Parent directories are created first.  ``OSError`` (permissions,
        disk full) propagates to the caller.
        """
        out = Path(path)
        self.ensure_directory(out.parent)
        out.write_text(content, encoding=self.encoding)
        logger.debug("Wrote %d bytes to %s", len(content), out)
        return out

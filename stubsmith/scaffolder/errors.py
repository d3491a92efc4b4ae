"""Exception hierarchy for the scaffolding engine.

Every error carries the offending name or path as attributes so the CLI can
format a precise message.  Filesystem failures are not wrapped: ``OSError``
propagates to the caller unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .models import ResourceResult


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class MissingTemplateError(ScaffoldError):
    """Raised when a template name has no file in any search directory."""

    def __init__(self, template_name: str, search_paths: Sequence[Path] = ()) -> None:
        self.template_name = template_name
        self.search_paths = [Path(p) for p in search_paths]
        searched = ", ".join(str(p) for p in self.search_paths) or "<none>"
        super().__init__(f"Template not found: {template_name} (searched: {searched})")


class ArtifactExistsError(ScaffoldError):
    """Raised under the ``fail`` collision policy when the target exists."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = Path(path)
        super().__init__(f"{name} already exists at {self.path}")


class InvalidNameError(ScaffoldError):
    """Raised for a blank artifact/resource name or one that is not a bare file name."""

    def __init__(
        self, value: str, what: str = "name", reason: str = "a non-empty name is required"
    ) -> None:
        self.value = value
        self.what = what
        self.reason = reason
        super().__init__(f"Invalid {what}: {value!r} ({reason})")


class ResourceGenerationError(ScaffoldError):
    """Raised when one step of a resource fails.

    ``result`` holds the partial :class:`ResourceResult`.  Artifacts written
    by earlier steps are listed there and remain on disk.
    """

    def __init__(self, step: str, result: "ResourceResult", cause: BaseException) -> None:
        self.step = step
        self.result = result
        self.cause = cause
        super().__init__(f"Resource {result.resource_name!r} failed at {step} step: {cause}")

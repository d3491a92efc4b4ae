"""stubsmith configuration.

Centralised, typed configuration for the scaffolding engine.  All settings
use Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .scaffolder.models import ArtifactKind, CollisionPolicy
from .scaffolder.templates import DEFAULT_TEMPLATE_DIR


class OutputDirs(BaseModel):
    """Subdirectory (relative to the project root) for each artifact kind."""

    model: str = Field(default="models")
    controller: str = Field(default="controllers")
    service: str = Field(default="services")

    def for_kind(self, kind: ArtifactKind | str) -> str:
        """Return the output subdirectory for *kind*."""
        return getattr(self, ArtifactKind(kind).value)

    def as_dict(self) -> dict[str, str]:
        """Return a plain ``{kind: subdir}`` mapping."""
        return {
            "model": self.model,
            "controller": self.controller,
            "service": self.service,
        }


class Config(BaseModel):
    """Global stubsmith configuration.

    Instances are typically created once by the CLI entry point and handed to
    the generators, which read the template directories and output layout
    from it.  The project root here is only a default: every generation call
    still receives the root explicitly.
    """

    project_root: Path = Field(default=Path("."))
    stubs_dir: Optional[Path] = Field(
        default=None, description="Project-level templates that override the bundled ones"
    )
    extension: str = Field(default=".py", description="File extension of generated artifacts")
    output_dirs: OutputDirs = Field(default_factory=OutputDirs)

    # The `make` and `resource` entry points historically disagree on this.
    make_conflict_policy: CollisionPolicy = Field(default=CollisionPolicy.RENAME)
    resource_conflict_policy: CollisionPolicy = Field(default=CollisionPolicy.FAIL)

    @field_validator("extension")
    @classmethod
    def _normalise_extension(cls, value: str) -> str:
        value = value.strip()
        if value and not value.startswith("."):
            value = "." + value
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def template_dirs(self) -> list[Path]:
        """Template search path: the override directory first, then the bundled one.

        A relative ``stubs_dir`` is taken relative to ``project_root``.
        """
        dirs: list[Path] = []
        if self.stubs_dir is not None:
            stubs = self.stubs_dir
            if not stubs.is_absolute():
                stubs = self.project_root / stubs
            dirs.append(stubs)
        dirs.append(DEFAULT_TEMPLATE_DIR)
        return dirs

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STUBSMITH_PROJECT_ROOT, STUBSMITH_STUBS_DIR, STUBSMITH_EXTENSION,
            STUBSMITH_ON_CONFLICT (applies to both entry points).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STUBSMITH_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["STUBSMITH_PROJECT_ROOT"])
        if os.environ.get("STUBSMITH_STUBS_DIR"):
            kwargs["stubs_dir"] = Path(os.environ["STUBSMITH_STUBS_DIR"])
        if os.environ.get("STUBSMITH_EXTENSION"):
            kwargs["extension"] = os.environ["STUBSMITH_EXTENSION"]
        if os.environ.get("STUBSMITH_ON_CONFLICT"):
            policy = CollisionPolicy(os.environ["STUBSMITH_ON_CONFLICT"].strip().lower())
            kwargs["make_conflict_policy"] = policy
            kwargs["resource_conflict_policy"] = policy
        return cls(**kwargs)

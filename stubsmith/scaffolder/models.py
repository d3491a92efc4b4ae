"""Pydantic v2 value objects passed between the scaffolding components.

``ArtifactSpec``, ``NameSet`` and ``GenerationResult`` are frozen: they are
created once per generation call and never shared between calls.
``ResourceResult`` is filled in step by step by the resource composer.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .naming import capitalize, pluralize, table_name, to_snake_case


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactKind(str, Enum):
    """Kinds of source artifact the engine can generate."""
    MODEL = "model"
    CONTROLLER = "controller"
    SERVICE = "service"


class CollisionPolicy(str, Enum):
    """What to do when the target file already exists."""
    FAIL = "fail"
    RENAME = "rename"


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------

class NameSet(BaseModel):
    """Derived naming forms shared by every artifact of one resource."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = Field(..., description="Capitalized base name, e.g. 'PlaylistTeam'")
    singular: str = Field(..., description="Lower-cased base name, e.g. 'song'")
    plural: str = Field(..., description="Pluralized singular, e.g. 'songs'")
    capitalized_singular: str
    capitalized_plural: str
    table_name: str = Field(..., description="snake_case plural, e.g. 'playlist_teams'")
    snake_name: str = Field(..., description="snake_case model name, e.g. 'playlist_team'")

    @classmethod
    def from_name(cls, base_name: str) -> "NameSet":
        """Compute every naming form from *base_name*.

        Deterministic: the same input always yields an equal ``NameSet``.
        """
        model_name = capitalize(base_name)
        singular = base_name.lower()
        plural = pluralize(singular)
        return cls(
            model_name=model_name,
            singular=singular,
            plural=plural,
            capitalized_singular=capitalize(singular),
            capitalized_plural=capitalize(plural),
            table_name=table_name(model_name),
            snake_name=to_snake_case(model_name),
        )

    def as_placeholders(self) -> dict[str, str]:
        """Return the template placeholder mapping for these names."""
        return {
            "model_name": self.model_name,
            "resource": self.singular,
            "plural_resource": self.plural,
            "capitalized_resource": self.capitalized_singular,
            "capitalized_plural": self.capitalized_plural,
            "table_name": self.table_name,
            "snake_name": self.snake_name,
        }


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class GenerateOptions(BaseModel):
    """Options for a single artifact generation."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    resource: bool = Field(
        default=False, description="Use the CRUD-shaped template instead of the basic one"
    )
    on_conflict: CollisionPolicy = Field(default=CollisionPolicy.FAIL)
    model_name: Optional[str] = Field(
        default=None, description="Model name to reference verbatim instead of re-deriving it"
    )
    names: Optional[NameSet] = Field(
        default=None, description="Shared NameSet computed by the resource composer"
    )


class ResourceOptions(BaseModel):
    """Options for a full resource (model + controller [+ service])."""

    model_config = ConfigDict(frozen=True)

    on_conflict: CollisionPolicy = Field(default=CollisionPolicy.FAIL)
    service: bool = Field(default=False, description="Also generate a service artifact")


class ArtifactSpec(BaseModel):
    """Everything needed to render and place one artifact."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    base_name: str
    target_directory: Path
    template_name: str
    placeholders: dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class GenerationResult(BaseModel):
    """Outcome of one successful artifact generation."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Absolute path of the written file")
    final_name: str = Field(..., description="Name used inside the file (may carry a Copy suffix)")
    kind: ArtifactKind
    collision_resolved: bool = False
    template_name: str = ""


class ResourceResult(BaseModel):
    """Aggregated outcome of a resource generation, possibly partial."""

    resource_name: str
    names: NameSet
    model: Optional[GenerationResult] = None
    controller: Optional[GenerationResult] = None
    service: Optional[GenerationResult] = None
    error: Optional[str] = Field(
        default=None, description="Message of the step that failed, if any"
    )

    @computed_field  # type: ignore[misc]
    @property
    def complete(self) -> bool:
        """True when every requested step succeeded."""
        return self.error is None

    @property
    def generated(self) -> list[GenerationResult]:
        """Results written so far, in generation order."""
        return [r for r in (self.model, self.controller, self.service) if r is not None]

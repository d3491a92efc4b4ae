"""stubsmith scaffolder -- generates models, controllers and services.

Turns a base name into source artifacts rendered from ``.stub`` templates,
either one at a time or as a full resource sharing one set of derived names.

Quick usage::

    from stubsmith.scaffolder import ResourceComposer, ResourceOptions

    composer = ResourceComposer()
    result = composer.generate("Song", "/path/to/project", ResourceOptions(service=True))
    for artifact in result.generated:
        print(artifact.kind, artifact.path)
"""

from stubsmith.scaffolder.collision import CollisionResolver
from stubsmith.scaffolder.errors import (
    ArtifactExistsError,
    InvalidNameError,
    MissingTemplateError,
    ResourceGenerationError,
    ScaffoldError,
)
from stubsmith.scaffolder.generator import (
    ArtifactGenerator,
    ControllerGenerator,
    ModelGenerator,
    ServiceGenerator,
    generator_for,
)
from stubsmith.scaffolder.models import (
    ArtifactKind,
    ArtifactSpec,
    CollisionPolicy,
    GenerateOptions,
    GenerationResult,
    NameSet,
    ResourceOptions,
    ResourceResult,
)
from stubsmith.scaffolder.resource import ResourceComposer
from stubsmith.scaffolder.templates import TemplateStore
from stubsmith.scaffolder.writer import ArtifactWriter

__all__ = [
    "ArtifactExistsError",
    "ArtifactGenerator",
    "ArtifactKind",
    "ArtifactSpec",
    "ArtifactWriter",
    "CollisionPolicy",
    "CollisionResolver",
    "ControllerGenerator",
    "GenerateOptions",
    "GenerationResult",
    "InvalidNameError",
    "MissingTemplateError",
    "ModelGenerator",
    "NameSet",
    "ResourceComposer",
    "ResourceGenerationError",
    "ResourceOptions",
    "ResourceResult",
    "ScaffoldError",
    "ServiceGenerator",
    "TemplateStore",
    "generator_for",
]

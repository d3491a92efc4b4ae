"""Single-artifact generators.

One generator class per artifact kind (model, controller, service).  Each
combines the naming conventions, the template store and the artifact writer
to turn a base name into exactly one file under the kind's output
subdirectory, following the selected collision policy.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ..utils import get_logger
from .collision import CollisionResolver
from .errors import ArtifactExistsError, InvalidNameError
from .models import (
    ArtifactKind,
    ArtifactSpec,
    CollisionPolicy,
    GenerateOptions,
    GenerationResult,
    NameSet,
)
from .naming import capitalize, ensure_suffix, strip_suffix
from .templates import TemplateStore
from .writer import ArtifactWriter

if TYPE_CHECKING:
    from ..config import Config

logger = get_logger(__name__)

DEFAULT_EXTENSION = ".py"

_SEPARATORS = ("/", "\\")


def validate_name(value: str, what: str = "name") -> str:
    """Return *value* stripped, or raise if it cannot be used as a file stem.

    Raises:
        InvalidNameError: *value* is blank, contains a path separator or is
            a relative path component (``.`` or ``..``).
    """
    if not value or not value.strip():
        raise InvalidNameError(value, what)
    name = value.strip()
    if any(sep in name for sep in _SEPARATORS) or name in (".", ".."):
        raise InvalidNameError(
            value, what, "path separators and relative components are not allowed"
        )
    return name


# ---------------------------------------------------------------------------
# Base generator
# ---------------------------------------------------------------------------


class ArtifactGenerator:
    """Generates one artifact of a fixed kind.

    Subclasses set the class attributes below and may extend
    :meth:`placeholders`.  Generators hold no per-call state, so one instance
    can serve any number of :meth:`generate` calls.
    """

    kind: ClassVar[ArtifactKind]
    suffix: ClassVar[str] = ""
    default_output_dir: ClassVar[str]
    basic_template: ClassVar[str]
    resource_template: ClassVar[str]

    def __init__(
        self,
        store: TemplateStore | None = None,
        writer: ArtifactWriter | None = None,
        *,
        output_dir: str | Path | None = None,
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        self.store = store or TemplateStore()
        self.writer = writer or ArtifactWriter()
        self.resolver = CollisionResolver(self.writer)
        self.output_dir = Path(output_dir or self.default_output_dir)
        self.extension = extension

    @classmethod
    def from_config(cls, config: "Config", store: TemplateStore | None = None) -> "ArtifactGenerator":
        """Build a generator using the layout and templates from *config*."""
        return cls(
            store or TemplateStore(config.template_dirs()),
            output_dir=config.output_dirs.for_kind(cls.kind),
            extension=config.extension,
        )

    # -- Naming ------------------------------------------------------------

    def canonical_name(self, base_name: str) -> str:
        """Capitalize *base_name* and make sure the kind suffix appears once."""
        return ensure_suffix(capitalize(base_name.strip()), self.suffix)

    def model_name_for(self, canonical: str) -> str:
        """The model an artifact belongs to (``SongController`` -> ``Song``)."""
        return strip_suffix(canonical, self.suffix)

    def template_name(self, options: GenerateOptions) -> str:
        return self.resource_template if options.resource else self.basic_template

    def placeholders(self, canonical: str, names: NameSet) -> dict[str, str]:
        """Build the placeholder mapping rendered into the template."""
        return {
            **names.as_placeholders(),
            "name": canonical,
            "service_name": f"{names.model_name}Service",
            "controller_name": f"{names.model_name}Controller",
        }

    # -- Public API --------------------------------------------------------

    def build_spec(
        self,
        base_name: str,
        project_root: str | Path,
        options: GenerateOptions | None = None,
    ) -> ArtifactSpec:
        """Derive names and placeholders for *base_name* without touching disk.

        Raises:
            InvalidNameError: *base_name* is blank or is not a bare file name.
        """
        options = options or GenerateOptions()
        canonical = self.canonical_name(validate_name(base_name, f"{self.kind.value} name"))
        model_name = options.model_name or self.model_name_for(canonical)
        names = options.names or NameSet.from_name(model_name)

        return ArtifactSpec(
            kind=self.kind,
            base_name=canonical,
            target_directory=Path(project_root).absolute() / self.output_dir,
            template_name=self.template_name(options),
            placeholders=self.placeholders(canonical, names),
        )

    def generate(
        self,
        base_name: str,
        project_root: str | Path,
        options: GenerateOptions | None = None,
    ) -> GenerationResult:
        """Render and write one artifact.

        Args:
            base_name: Free-form name, e.g. ``"song"`` or ``"SongController"``.
            project_root: Directory the kind's output subdirectory lives in.
            options: Template mode, collision policy and shared names.

        Returns:
            A :class:`GenerationResult` describing the written file.

        Raises:
            InvalidNameError: Blank name, or one containing a path separator.
            MissingTemplateError: The selected template does not exist.
            ArtifactExistsError: Target exists and the policy is ``fail``.
            OSError: Directory creation or the write failed.
        """
        options = options or GenerateOptions()
        spec = self.build_spec(base_name, project_root, options)
        path = self.writer.resolve_target_path(
            spec.target_directory, "", spec.base_name, self.extension
        )

        content = self.store.render(self.store.load(spec.template_name), spec.placeholders)
        final_name = spec.base_name
        collision = False

        if self.writer.exists(path):
            if options.on_conflict is CollisionPolicy.FAIL:
                raise ArtifactExistsError(spec.base_name, path)
            path, final_name = self.resolver.resolve(spec.base_name, path)
            content = self.resolver.rewrite(content, spec.base_name, final_name)
            collision = True
            logger.warning(
                "%s %s already exists, creating %s instead",
                self.kind.value.capitalize(), spec.base_name, final_name,
            )

        self.writer.write(path, content)
        logger.info("Created %s %s at %s", self.kind.value, final_name, path)

        return GenerationResult(
            path=path,
            final_name=final_name,
            kind=self.kind,
            collision_resolved=collision,
            template_name=spec.template_name,
        )


# ---------------------------------------------------------------------------
# Concrete generators
# ---------------------------------------------------------------------------


class ModelGenerator(ArtifactGenerator):
    """Generates a SQLAlchemy declarative model."""

    kind = ArtifactKind.MODEL
    default_output_dir = "models"
    basic_template = "model"
    resource_template = "resource-model"


class ControllerGenerator(ArtifactGenerator):
    """Generates a FastAPI router module (``<Model>Controller``)."""

    kind = ArtifactKind.CONTROLLER
    suffix = "Controller"
    default_output_dir = "controllers"
    basic_template = "controller"
    resource_template = "resource-controller"


class ServiceGenerator(ArtifactGenerator):
    """Generates a service class wrapping data access for one model."""

    kind = ArtifactKind.SERVICE
    suffix = "Service"
    default_output_dir = "services"
    basic_template = "service"
    resource_template = "resource-service"


GENERATORS: dict[ArtifactKind, type[ArtifactGenerator]] = {
    ArtifactKind.MODEL: ModelGenerator,
    ArtifactKind.CONTROLLER: ControllerGenerator,
    ArtifactKind.SERVICE: ServiceGenerator,
}


def generator_for(kind: ArtifactKind | str) -> type[ArtifactGenerator]:
    """Return the generator class for *kind* (``"model"``, ``"controller"``...)."""
    return GENERATORS[ArtifactKind(kind)]

"""Resource composition: model + controller (+ optional service).

A resource is a group of artifacts that share one :class:`NameSet`.  Steps
run in order and stop at the first failure.  Nothing already written is
rolled back; the partial :class:`ResourceResult` travels with the raised
:class:`ResourceGenerationError` so the caller can decide what to do with
orphaned files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..utils import get_logger
from .errors import ResourceGenerationError
from .generator import ControllerGenerator, ModelGenerator, ServiceGenerator, validate_name
from .models import GenerateOptions, NameSet, ResourceOptions, ResourceResult
from .templates import TemplateStore
from .writer import ArtifactWriter

if TYPE_CHECKING:
    from ..config import Config

logger = get_logger(__name__)


class ResourceComposer:
    """Orchestrates the per-kind generators for a full resource."""

    def __init__(
        self,
        model_generator: ModelGenerator | None = None,
        controller_generator: ControllerGenerator | None = None,
        service_generator: ServiceGenerator | None = None,
    ) -> None:
        store = TemplateStore()
        writer = ArtifactWriter()
        self.model_generator = model_generator or ModelGenerator(store, writer)
        self.controller_generator = controller_generator or ControllerGenerator(store, writer)
        self.service_generator = service_generator or ServiceGenerator(store, writer)

    @classmethod
    def from_config(cls, config: "Config") -> "ResourceComposer":
        """Build a composer whose generators share one template store."""
        store = TemplateStore(config.template_dirs())
        return cls(
            ModelGenerator.from_config(config, store),
            ControllerGenerator.from_config(config, store),
            ServiceGenerator.from_config(config, store),
        )

    def generate(
        self,
        resource_name: str,
        project_root: str | Path,
        options: ResourceOptions | None = None,
    ) -> ResourceResult:
        """Generate every artifact of *resource_name* under *project_root*.

        Returns:
            A complete :class:`ResourceResult`.

        Raises:
            InvalidNameError: Blank resource name, or one containing a path
                separator; nothing is written.
            ResourceGenerationError: A step failed.  ``exc.result`` lists the
                artifacts written before the failure and ``exc.cause`` is the
                original error.
        """
        options = options or ResourceOptions()
        base = validate_name(resource_name, "resource name")
        names = NameSet.from_name(base)
        result = ResourceResult(resource_name=base, names=names)
        step_options = GenerateOptions(
            resource=True,
            on_conflict=options.on_conflict,
            model_name=names.model_name,
            names=names,
        )

        logger.info("Generating resource %s (routes: /%s/)", names.model_name, names.plural)

        steps = [
            ("model", self.model_generator, names.model_name),
            ("controller", self.controller_generator, f"{names.model_name}Controller"),
        ]
        if options.service:
            steps.append(("service", self.service_generator, f"{names.model_name}Service"))

        for step, generator, artifact_name in steps:
            try:
                generated = generator.generate(artifact_name, project_root, step_options)
            except Exception as exc:
                result.error = str(exc)
                logger.debug("Resource %s failed at %s step: %s", base, step, exc)
                raise ResourceGenerationError(step, result, exc) from exc
            setattr(result, step, generated)

        logger.info("Generated %s resource (%d files)", names.model_name, len(result.generated))
        return result

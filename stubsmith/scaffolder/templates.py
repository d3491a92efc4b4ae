"""Template loading and placeholder substitution for artifact scaffolding.

Provides the TemplateStore class which looks up ``.stub`` templates by logical
name across an ordered list of search directories and fills in ``{{key}}``
placeholders.  Rendering is data-only: there are no expressions, loops or
filters, just a single substitution pass over a closed set of keys.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from ..utils import get_logger
from .errors import MissingTemplateError

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".stub"

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z_][A-Za-z0-9_]*)\}\}")


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Loads named templates and renders ``{{key}}`` placeholders.

    Search directories are consulted in order, so a project-level stubs
    directory placed before the bundled one overrides individual templates.
    The directories are fixed at construction; template files are re-read on
    every :meth:`load` call.
    """

    def __init__(self, template_dirs: Sequence[str | Path] | str | Path | None = None) -> None:
        if template_dirs is None:
            template_dirs = [DEFAULT_TEMPLATE_DIR]
        elif isinstance(template_dirs, (str, Path)):
            template_dirs = [template_dirs]
        self.template_dirs = [Path(d) for d in template_dirs]
        for directory in self.template_dirs:
            if not directory.is_dir():
                logger.warning("Skipping missing template directory: %s", directory)
        self.env = Environment(
            loader=FileSystemLoader([str(d) for d in self.template_dirs]),
            keep_trailing_newline=True,
        )

    # -- Loading -----------------------------------------------------------

    def load(self, template_name: str) -> str:
        """Return the raw text of the template called *template_name*.

        Args:
            template_name: Logical name such as ``"resource-controller"``.
                The ``.stub`` suffix is optional.

        Raises:
            MissingTemplateError: No search directory contains the template.
        """
        filename = _template_filename(template_name)
        try:
            source, path, _uptodate = self.env.loader.get_source(self.env, filename)
        except TemplateNotFound as exc:
            raise MissingTemplateError(template_name, self.template_dirs) from exc
        logger.debug("Loaded template %s from %s", template_name, path)
        return source

    # -- Rendering ---------------------------------------------------------

    @staticmethod
    def render(template: str, replacements: Mapping[str, object]) -> str:
        """Substitute every ``{{key}}`` whose key is in *replacements*.

        Unknown placeholders are left verbatim so a template can be rendered
        in stages.  Substituted values are not scanned again.
        """

        def _substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key in replacements:
                return str(replacements[key])
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(_substitute, template)

    def render_template(self, template_name: str, replacements: Mapping[str, object]) -> str:
        """Load *template_name* and render it in one call."""
        return self.render(self.load(template_name), replacements)

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return the sorted logical names visible across all search paths."""
        names = {
            name[: -len(TEMPLATE_SUFFIX)]
            for name in self.env.list_templates(extensions=[TEMPLATE_SUFFIX.lstrip(".")])
        }
        return sorted(names)

    def placeholders(self, template_name: str) -> list[str]:
        """Return the distinct placeholder keys used by a template, in order."""
        seen: dict[str, None] = {}
        for match in PLACEHOLDER_PATTERN.finditer(self.load(template_name)):
            seen.setdefault(match.group(1), None)
        return list(seen)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _template_filename(template_name: str) -> str:
    if template_name.endswith(TEMPLATE_SUFFIX):
        return template_name
    return template_name + TEMPLATE_SUFFIX

"""Shared pytest fixtures for the stubsmith test suite.

Provides reusable fixtures for:
- Temporary project roots (never the process working directory)
- Template directories with small, predictable stubs
- Pre-wired generators and resource composers
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from stubsmith.scaffolder import (
    ArtifactWriter,
    ControllerGenerator,
    ModelGenerator,
    ResourceComposer,
    ServiceGenerator,
    TemplateStore,
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep STUBSMITH_* variables from the host shell out of every test."""
    for var in (
        "STUBSMITH_PROJECT_ROOT",
        "STUBSMITH_STUBS_DIR",
        "STUBSMITH_EXTENSION",
        "STUBSMITH_ON_CONFLICT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project root for generated artifacts (auto-cleanup)."""
    root = tmp_path / "project"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

SIMPLE_STUBS: dict[str, str] = {
    "model": "class {{name}}:\n    table = '{{table_name}}'\n",
    "resource-model": "class {{name}}:  # resource\n    table = '{{table_name}}'\n",
    "controller": "class {{name}}:\n    pass\n",
    "resource-controller": textwrap.dedent(
        """\
        from services.{{service_name}} import {{service_name}}


        class {{name}}:
            model = "{{model_name}}"
            route = "/{{plural_resource}}"
        """
    ),
    "service": "class {{name}}:\n    pass\n",
    "resource-service": "class {{name}}:\n    model = '{{model_name}}'\n",
}


def _write_stubs(directory: Path, stubs: dict[str, str]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name, body in stubs.items():
        (directory / f"{name}.stub").write_text(body, encoding="utf-8")
    return directory


@pytest.fixture
def make_stubs(tmp_path: Path):
    """Factory writing ``{name}.stub`` files into a named temp directory.

    Usage:
        def test_something(make_stubs):
            stubs = make_stubs("override", {"model": "class {{name}}: ..."})
    """

    def _make(dirname: str, stubs: dict[str, str]) -> Path:
        return _write_stubs(tmp_path / dirname, stubs)

    return _make


@pytest.fixture
def simple_stubs() -> dict[str, str]:
    """A fresh copy of the compact test templates, safe to edit per test."""
    return dict(SIMPLE_STUBS)


@pytest.fixture
def stubs_dir(make_stubs, simple_stubs) -> Path:
    """Directory holding the compact test templates."""
    return make_stubs("stubs", simple_stubs)


@pytest.fixture
def store(stubs_dir: Path) -> TemplateStore:
    return TemplateStore([stubs_dir])


@pytest.fixture
def bundled_store() -> TemplateStore:
    """Store reading the templates shipped with the package."""
    return TemplateStore()


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

@pytest.fixture
def writer() -> ArtifactWriter:
    return ArtifactWriter()


@pytest.fixture
def model_generator(store: TemplateStore, writer: ArtifactWriter) -> ModelGenerator:
    return ModelGenerator(store, writer)


@pytest.fixture
def controller_generator(store: TemplateStore, writer: ArtifactWriter) -> ControllerGenerator:
    return ControllerGenerator(store, writer)


@pytest.fixture
def service_generator(store: TemplateStore, writer: ArtifactWriter) -> ServiceGenerator:
    return ServiceGenerator(store, writer)


@pytest.fixture
def composer(
    model_generator: ModelGenerator,
    controller_generator: ControllerGenerator,
    service_generator: ServiceGenerator,
) -> ResourceComposer:
    return ResourceComposer(model_generator, controller_generator, service_generator)

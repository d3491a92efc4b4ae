"""Unit tests for Config and related Pydantic models (stubsmith.config).

Tests cover:
- OutputDirs defaults, for_kind, as_dict
- Config defaults and extension normalisation
- template_dirs ordering and relative stubs directories
- save/load round trip, from_env
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from stubsmith.config import Config, OutputDirs
from stubsmith.scaffolder.models import ArtifactKind, CollisionPolicy
from stubsmith.scaffolder.templates import DEFAULT_TEMPLATE_DIR


# ---------------------------------------------------------------------------
# OutputDirs
# ---------------------------------------------------------------------------


class TestOutputDirs:
    @pytest.mark.unit
    def test_defaults(self):
        dirs = OutputDirs()
        assert dirs.as_dict() == {
            "model": "models",
            "controller": "controllers",
            "service": "services",
        }

    @pytest.mark.unit
    def test_for_kind(self):
        dirs = OutputDirs(model="app/models")
        assert dirs.for_kind(ArtifactKind.MODEL) == "app/models"
        assert dirs.for_kind("service") == "services"

    @pytest.mark.unit
    def test_for_unknown_kind(self):
        with pytest.raises(ValueError):
            OutputDirs().for_kind("migration")


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.project_root == Path(".")
        assert config.stubs_dir is None
        assert config.extension == ".py"
        assert config.make_conflict_policy is CollisionPolicy.RENAME
        assert config.resource_conflict_policy is CollisionPolicy.FAIL

    @pytest.mark.unit
    @pytest.mark.parametrize(("raw", "expected"), [("js", ".js"), (".ts", ".ts"), (" py ", ".py")])
    def test_extension_normalised(self, raw, expected):
        assert Config(extension=raw).extension == expected

    @pytest.mark.unit
    def test_invalid_policy_rejected(self):
        with pytest.raises(ValidationError):
            Config(make_conflict_policy="overwrite")


class TestTemplateDirs:
    @pytest.mark.unit
    def test_bundled_only(self):
        assert Config().template_dirs() == [DEFAULT_TEMPLATE_DIR]

    @pytest.mark.unit
    def test_override_first(self, tmp_path):
        config = Config(stubs_dir=tmp_path / "stubs")
        assert config.template_dirs() == [tmp_path / "stubs", DEFAULT_TEMPLATE_DIR]

    @pytest.mark.unit
    def test_relative_override_is_under_project_root(self, tmp_path):
        config = Config(project_root=tmp_path, stubs_dir=Path("stubs"))
        assert config.template_dirs()[0] == tmp_path / "stubs"


class TestConfigPersistence:
    @pytest.mark.unit
    def test_save_and_load(self, tmp_path):
        config = Config(
            project_root=tmp_path,
            extension=".js",
            output_dirs=OutputDirs(model="app/models"),
            make_conflict_policy=CollisionPolicy.FAIL,
        )
        target = config.save(tmp_path / "conf" / "stubsmith.json")
        assert target.exists()
        loaded = Config.load(target)
        assert loaded == config

    @pytest.mark.unit
    def test_load_rejects_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"extension": 3, "output_dirs": []}', encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.load(path)


class TestFromEnv:
    @pytest.mark.unit
    def test_empty_environment(self):
        with patch.dict("os.environ", {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_reads_variables(self, tmp_path):
        env = {
            "STUBSMITH_PROJECT_ROOT": str(tmp_path),
            "STUBSMITH_STUBS_DIR": str(tmp_path / "stubs"),
            "STUBSMITH_EXTENSION": "js",
            "STUBSMITH_ON_CONFLICT": "FAIL",
        }
        with patch.dict("os.environ", env, clear=True):
            config = Config.from_env()
        assert config.project_root == tmp_path
        assert config.stubs_dir == tmp_path / "stubs"
        assert config.extension == ".js"
        assert config.make_conflict_policy is CollisionPolicy.FAIL
        assert config.resource_conflict_policy is CollisionPolicy.FAIL

    @pytest.mark.unit
    def test_invalid_policy(self):
        with patch.dict("os.environ", {"STUBSMITH_ON_CONFLICT": "overwrite"}, clear=True):
            with pytest.raises(ValueError):
                Config.from_env()

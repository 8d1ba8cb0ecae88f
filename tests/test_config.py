# -*- encoding: utf-8 -*-
"""
Tests for mapper configuration.
"""

import tomllib

import pytest

from europass_credential.crosswalk import MapperConfig, load_config


class TestMapperConfig:
    """Tests for MapperConfig."""

    def test_defaults(self):
        """Test the default configuration."""
        config = MapperConfig()
        assert config.language_preference == ["en", "fi", "sv"]
        assert config.home_institution_urn is None
        assert config.credential_type == "generic"
        assert config.id_namespace == "urn:sisu"

    def test_from_dict(self):
        """Test building from a settings mapping."""
        config = MapperConfig.from_dict({
            "language_preference": ["fi", "en"],
            "home_institution_urn": "urn:code:educational-institution:10122",
            "credential_type": "learning-activity",
        })
        assert config.language_preference == ["fi", "en"]
        assert config.credential_type == "learning-activity"
        assert config.share_tolerance == 1e-9

    def test_unknown_key(self):
        """Test unknown settings are rejected."""
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            MapperConfig.from_dict({"language": "fi"})

    @pytest.mark.parametrize("settings", [
        {"language_preference": []},
        {"language_preference": ["ru"]},
        {"home_institution_urn": "urn:code:educational-institution:99999"},
        {"credential_type": "diploma"},
        {"id_namespace": "sisu"},
        {"id_namespace": "urn:sisu:"},
        {"share_tolerance": 1.5},
        {"person_scheme_id": ""},
        {"language_preference": "fi"},
        {"language_preference": 5},
        {"language_preference": ["fi", 5]},
        {"home_institution_urn": 10122},
        {"credential_type": ["generic"]},
        {"id_namespace": 5},
        {"share_tolerance": "0.1"},
        {"share_tolerance": True},
        {"person_scheme_id": 1},
        {"attainment_scheme_id": None},
        {"student_number_scheme_id": {"a": 1}},
    ])
    def test_invalid_settings(self, settings):
        """Test each invalid setting is rejected."""
        with pytest.raises(ValueError):
            MapperConfig.from_dict(settings)


class TestLoadConfig:
    """Tests for loading configuration from pyproject.toml."""

    def test_load(self, tmp_path):
        """Test the tool section is read."""
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "registry"\n\n'
            '[tool.europass-credential]\n'
            'home_institution_urn = "urn:code:educational-institution:01901"\n'
            'language_preference = ["sv", "fi"]\n'
            'share_tolerance = 1e-6\n',
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.home_institution_urn == "urn:code:educational-institution:01901"
        assert config.language_preference == ["sv", "fi"]
        assert config.share_tolerance == 1e-6

    @pytest.mark.parametrize("line", ['share_tolerance = "0.1"', "id_namespace = 5"])
    def test_wrongly_typed_setting(self, tmp_path, line):
        """Test a wrongly typed TOML value is a ValueError."""
        path = tmp_path / "pyproject.toml"
        path.write_text(f"[tool.europass-credential]\n{line}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must be a"):
            load_config(path)

    def test_missing_section(self, tmp_path):
        """Test a file without the tool section yields defaults."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "registry"\n', encoding="utf-8")
        assert load_config(path) == MapperConfig()

    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        """Test a malformed file."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.europass-credential\n", encoding="utf-8")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)

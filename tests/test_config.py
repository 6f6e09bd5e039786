"""Tests for encoder settings."""

import json

import pydantic
import pytest

from sound_index.config import EncoderSettings, EncoderType, load_settings, save_settings
from sound_index.errors import ConfigurationError, ResourceError
from sound_index.phonetic import get_encoder


class TestEncoderSettings:
    """Tests for EncoderSettings model."""

    def test_defaults(self):
        """Test default settings."""
        settings = EncoderSettings()

        assert settings.algorithm == EncoderType.SOUNDEX
        assert settings.length == 4
        assert settings.full is False

    def test_algorithm_from_string(self):
        """Test algorithm accepts its string value."""
        settings = EncoderSettings(algorithm="soundex")

        assert settings.algorithm is EncoderType.SOUNDEX

    def test_length_too_short(self):
        """Test length must leave room for a digit."""
        with pytest.raises(pydantic.ValidationError):
            EncoderSettings(length=1)

    def test_unknown_field(self):
        """Test misspelled fields are rejected."""
        with pytest.raises(pydantic.ValidationError):
            EncoderSettings(lenght=6)

    def test_unknown_algorithm(self):
        """Test unknown algorithm names are rejected."""
        with pytest.raises(pydantic.ValidationError):
            EncoderSettings(algorithm="metaphone")


class TestLoadSaveSettings:
    """Tests for settings persistence."""

    def test_save_and_load(self, tmp_path):
        """Test saved settings load back unchanged."""
        settings = EncoderSettings(length=6, full=True)
        path = save_settings(tmp_path / "encoder.json", settings)

        assert path == tmp_path / "encoder.json"
        assert not (tmp_path / "encoder.json.tmp").exists()
        assert load_settings(path) == settings

    def test_saved_format(self, tmp_path):
        """Test the file stores plain JSON values."""
        path = save_settings(tmp_path / "nested" / "encoder.json", EncoderSettings())

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"algorithm": "soundex", "length": 4, "full": False}

    def test_partial_file(self, tmp_path):
        """Test missing keys fall back to defaults."""
        path = tmp_path / "encoder.json"
        path.write_text('{"length": 5}', encoding="utf-8")

        settings = load_settings(str(path))

        assert settings.length == 5
        assert settings.full is False

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ResourceError."""
        with pytest.raises(ResourceError) as exc_info:
            load_settings(tmp_path / "missing.json")

        assert "missing.json" in exc_info.value.context["path"]

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ConfigurationError."""
        path = tmp_path / "encoder.json"
        path.write_text("{length: 5", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)

        assert exc_info.value.context["line"] == 1

    def test_invalid_values(self, tmp_path):
        """Test out-of-range values raise ConfigurationError."""
        path = tmp_path / "encoder.json"
        path.write_text('{"length": 0}', encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_misspelled_key(self, tmp_path):
        """Test a misspelled key raises ConfigurationError instead of falling back to defaults."""
        path = tmp_path / "encoder.json"
        path.write_text('{"lenght": 6}', encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)

        assert "lenght" in exc_info.value.message

    def test_not_an_object(self, tmp_path):
        """Test a JSON array raises ConfigurationError."""
        path = tmp_path / "encoder.json"
        path.write_text("[4]", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_loaded_settings_drive_encoder(self, tmp_path):
        """Test an encoder built from a settings file."""
        path = tmp_path / "encoder.json"
        path.write_text('{"algorithm": "soundex", "full": true}', encoding="utf-8")

        encoder = get_encoder(load_settings(path))

        assert encoder.encode("hello world") == "H4643"

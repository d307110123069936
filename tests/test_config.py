"""
Unit tests for tolerance configuration.
"""

import json

import pytest

from mechTC.config import (
    Tolerances, get_tolerances, set_tolerances, reset_tolerances, load_config,
)


class TestTolerances:
    """Tests for the Tolerances settings object."""

    def test_defaults(self):
        """Test default tolerance values."""
        assert Tolerances().singular_rtol == 1e-12
        assert get_tolerances() == Tolerances()

    def test_negative_rejected(self):
        """Test that a negative tolerance is rejected."""
        with pytest.raises(ValueError):
            Tolerances(singular_rtol=-1.0)

    def test_from_dict(self):
        """Test building settings from a mapping."""
        tol = Tolerances.from_dict({"singular_rtol": "1e-8"})
        assert tol.singular_rtol == 1e-8
        assert tol.to_dict() == {"singular_rtol": 1e-8}

    def test_unknown_key(self):
        """Test that unknown setting names raise."""
        with pytest.raises(ValueError, match="Unknown"):
            Tolerances.from_dict({"singular_atol": 1e-8})

    def test_set_and_reset(self):
        """Test replacing and restoring the process-wide settings."""
        set_tolerances(Tolerances(singular_rtol=1e-6))
        assert get_tolerances().singular_rtol == 1e-6
        reset_tolerances()
        assert get_tolerances().singular_rtol == 1e-12

    def test_set_requires_tolerances(self):
        """Test that only Tolerances objects can be installed."""
        with pytest.raises(TypeError):
            set_tolerances({"singular_rtol": 1e-6})


class TestLoadConfig:
    """Tests for load_config."""

    def test_load(self, tmp_path):
        """Test loading tolerances from a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"tolerances": {"singular_rtol": 1e-9}}))
        assert load_config(path).singular_rtol == 1e-9

    def test_missing_section_gives_defaults(self, tmp_path):
        """Test that a file without a tolerances section gives defaults."""
        path = tmp_path / "config.json"
        path.write_text("{}")
        assert load_config(str(path)) == Tolerances()

    def test_not_an_object(self, tmp_path):
        """Test that a non-object JSON document is rejected."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            load_config(path)

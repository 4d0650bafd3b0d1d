"""Tests for configuration access and validation."""

import pytest

import config
from errors import ConfigurationError


class TestGetActiveParams:
    """Mode-dependent parameter merging."""

    def test_fine_mode(self, monkeypatch):
        monkeypatch.setattr(config, "FINE_MODE", True)
        params = config.get_active_params()
        assert params["TOLERANCE"] == config.FINE["TOLERANCE"]
        assert params["MAX_EDGES"] == config.FINE["MAX_EDGES"]

    def test_coarse_mode(self, monkeypatch):
        monkeypatch.setattr(config, "FINE_MODE", False)
        params = config.get_active_params()
        assert params["TOLERANCE"] == config.COARSE["TOLERANCE"]

    def test_shared_values_present(self):
        params = config.get_active_params()
        for key in ("DISTANCE_FUNCTION", "SCAN_DIRECTIONS", "INCLINE_ANGLE",
                    "EDGE_COLOR", "CANVAS_BACKGROUND"):
            assert key in params


class TestValidateScanParams:
    """Fail-fast parameter checks."""

    def test_valid(self):
        config.validate_scan_params(0, 0)
        config.validate_scan_params(10, 2.5)

    @pytest.mark.parametrize("max_edges,tolerance", [(-1, 0), (0, -0.5)])
    def test_invalid(self, max_edges, tolerance):
        with pytest.raises(ConfigurationError):
            config.validate_scan_params(max_edges, tolerance)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            config.validate_scan_params(-1, 0)

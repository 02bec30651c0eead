# tests/test_tour_config.py
"""
Unit tests for TourConfig class.
"""

from guidedtour import TourConfig


class TestTourConfig:
    """Test configuration options."""

    def test_default_config(self):
        config = TourConfig()

        assert config.verbose == False
        assert config.show_headers == True
        assert config.server == "primary"
        assert config.wait_for_background == True
        assert config.background_timeout > 0

    def test_custom_config(self):
        config = TourConfig(
            verbose=True,
            show_headers=False,
            server="backup",
            wait_for_background=False,
            background_timeout=1.0
        )

        assert config.verbose == True
        assert config.show_headers == False
        assert config.server == "backup"
        assert config.wait_for_background == False
        assert config.background_timeout == 1.0

    def test_config_repr(self):
        repr_str = repr(TourConfig(server="backup"))
        assert 'TourConfig' in repr_str
        assert 'backup' in repr_str

"""Tests for the console surface."""

from spotcheck.models.common import ForecastType
from spotcheck.models.configuration import ConfigurationUpdate, FormValues
from spotcheck.ui.surface import ConsoleSurface


class TestConsoleSurface:
    def test_starts_empty(self):
        surface = ConsoleSurface()
        assert surface.get_field_values() == FormValues()
        assert surface.submit_enabled is False
        assert surface.busy is False

    def test_edit_only_given_fields(self):
        surface = ConsoleSurface(FormValues(spot_name="Rincon", swell=True))
        surface.edit(number_of_days="4", swell=False)
        assert surface.values == FormValues(spot_name="Rincon", number_of_days="4")

    def test_set_field_values_layers_update(self):
        surface = ConsoleSurface(FormValues(spot_name="Rincon"))
        surface.set_field_values(
            ConfigurationUpdate(number_of_days="2", forecast_types=(ForecastType.TIDES,))
        )
        assert surface.values == FormValues(
            spot_name="Rincon", number_of_days="2", tides=True
        )

    def test_alerts_printed_and_kept(self, capsys):
        surface = ConsoleSurface()
        surface.show_error("Error", "device offline")
        surface.show_success("Success", "saved")
        out = capsys.readouterr().out
        assert "device offline" in out
        assert "saved" in out
        assert surface.alerts == [("Error", "device offline"), ("Success", "saved")]

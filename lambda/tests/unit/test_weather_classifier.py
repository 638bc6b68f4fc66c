"""
Testes Unitários - classify_icon
"""
import itertools

import pytest

from domain.helpers.weather_classifier import classify_icon
from domain.value_objects.icon_kind import IconKind


class TestClassifyIcon:
    """Prioridade chuva > nuvens > sol"""

    def test_empty_list_is_sun(self):
        """Lista vazia resulta em sol"""
        assert classify_icon([]) == IconKind.SUN

    def test_clear_is_sun(self):
        assert classify_icon(["Clear"]) == IconKind.SUN

    def test_unknown_condition_is_sun(self):
        """Condições desconhecidas nunca falham"""
        assert classify_icon(["Snow", "Tornado"]) == IconKind.SUN

    @pytest.mark.parametrize("condition", ["Rain", "Drizzle", "Thunderstorm"])
    def test_rain_family(self, condition):
        assert classify_icon([condition]) == IconKind.RAIN

    @pytest.mark.parametrize("condition", ["Clouds", "Mist", "Fog", "Haze", "Smoke"])
    def test_cloud_family(self, condition):
        assert classify_icon([condition]) == IconKind.CLOUD

    def test_case_insensitive(self):
        assert classify_icon(["RAIN"]) == IconKind.RAIN
        assert classify_icon(["cLoUdS"]) == IconKind.CLOUD

    def test_rain_wins_regardless_of_order(self):
        """REGRA: presença de chuva e nuvens sempre resulta em chuva"""
        conditions = ["Clouds", "Drizzle", "Clear", "Mist"]
        for permutation in itertools.permutations(conditions):
            assert classify_icon(list(permutation)) == IconKind.RAIN

    def test_cloud_wins_over_clear(self):
        assert classify_icon(["Clear", "Clear", "Clouds"]) == IconKind.CLOUD

    def test_accepts_generator(self):
        assert classify_icon(c for c in ["Clear", "Haze"]) == IconKind.CLOUD

    def test_icon_kind_serializes_as_string(self):
        assert IconKind.RAIN.value == "rain"
        assert IconKind.SUN == "sun"

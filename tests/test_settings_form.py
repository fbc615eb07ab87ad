"""Tests for the calculator defaults page and its configuration record."""

import pytest

from fuel_calculator.forms import FuelCalculatorSettingsForm
from fuel_calculator.models import CONFIG_KEY, CalculatorSettings

pytestmark = pytest.mark.django_db

URL = "/fuel-calculator/settings/"


def settings_data(**overrides):
    data = {
        "default_distance": "250",
        "default_consumption": "7.2",
        "default_price_per_liter": "1.89",
    }
    data.update(overrides)
    return data


class TestCalculatorSettings:
    def test_load_creates_record_from_defaults(self, calculator_defaults):
        config = CalculatorSettings.load()
        assert config.key == CONFIG_KEY
        assert config.default_distance == 100.0
        assert config.default_consumption == 6.5
        assert config.default_price_per_liter == 1.75

    def test_load_returns_single_record(self, calculator_defaults):
        first = CalculatorSettings.load()
        second = CalculatorSettings.load()
        assert first.pk == second.pk
        assert CalculatorSettings.objects.count() == 1


class TestSettingsView:
    def test_anonymous_is_denied(self, client):
        assert client.get(URL).status_code == 403
        assert client.post(URL, settings_data()).status_code == 403

    def test_user_without_permission_is_denied(self, client, django_user_model):
        user = django_user_model.objects.create_user(username="carol", password="secret")
        client.force_login(user)
        assert client.get(URL).status_code == 403

    def test_shows_current_values(self, admin_client, calculator_defaults):
        response = admin_client.get(URL)
        assert response.status_code == 200
        assert response.context["form"].initial["default_consumption"] == 6.5

    def test_save(self, admin_client, calculator_defaults, audit_records):
        response = admin_client.post(URL, settings_data(), follow=True)
        assert response.redirect_chain == [(URL, 302)]

        config = CalculatorSettings.load()
        assert config.default_distance == 250.0
        assert config.default_consumption == 7.2
        assert config.default_price_per_liter == 1.89

        messages = [str(m) for m in response.context["messages"]]
        assert messages == ["The configuration options have been saved."]
        assert audit_records() == [
            "User admin with IP 127.0.0.1 changed the calculator defaults: distance "
            "250 km, consumption 7.2 l/100km, price per liter 1.89 EUR."
        ]

    def test_saved_defaults_feed_the_calculator(self, admin_client, calculator_defaults):
        admin_client.post(
            URL,
            settings_data(
                default_distance="200", default_consumption="5", default_price_per_liter="2"
            ),
        )
        response = admin_client.get("/fuel-calculator/")
        assert response.context["fuel_spent"] == "10 liters"
        assert response.context["fuel_cost"] == "20 EUR"

    def test_invalid_value_is_not_saved(self, admin_client, calculator_defaults, audit_records):
        response = admin_client.post(URL, settings_data(default_price_per_liter="0"))
        assert response.status_code == 200
        assert response.context["form"].errors == {
            "default_price_per_liter": ["Default price per liter must be greater than 0."]
        }
        assert CalculatorSettings.load().default_price_per_liter == 1.75
        assert audit_records() == []


class TestSettingsForm:
    def test_zero_distance_is_allowed(self, calculator_defaults):
        form = FuelCalculatorSettingsForm(
            data=settings_data(default_distance="0"), instance=CalculatorSettings.load()
        )
        assert form.is_valid()

    def test_negative_distance_is_rejected(self, calculator_defaults):
        form = FuelCalculatorSettingsForm(
            data=settings_data(default_distance="-5"), instance=CalculatorSettings.load()
        )
        assert not form.is_valid()
        assert form.errors["default_distance"] == [
            "Default distance must be greater than or equal to 0."
        ]

    def test_missing_value_uses_field_error(self, calculator_defaults):
        form = FuelCalculatorSettingsForm(
            data=settings_data(default_consumption=""), instance=CalculatorSettings.load()
        )
        assert not form.is_valid()
        assert list(form.errors) == ["default_consumption"]

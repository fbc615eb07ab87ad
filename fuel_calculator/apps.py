from django.apps import AppConfig


class FuelCalculatorConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "fuel_calculator"
    verbose_name = "Fuel calculator"

from django.db import models
from django.utils.translation import gettext_lazy as _

from .utils import calculator_setting

CONFIG_KEY = "fuel_calculator.settings"


class CalculatorSettings(models.Model):
    """Default trip figures used to prefill the calculator form."""

    key = models.CharField(max_length=64, unique=True, default=CONFIG_KEY)
    default_distance = models.FloatField(_("Default distance"))
    default_consumption = models.FloatField(_("Default consumption"))
    default_price_per_liter = models.FloatField(_("Default price per liter"))
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("fuel calculator settings")
        verbose_name_plural = _("fuel calculator settings")

    def __str__(self):
        return self.key

    @classmethod
    def load(cls):
        """Return the settings record, creating it from the configured defaults."""
        config, _created = cls.objects.get_or_create(
            key=CONFIG_KEY,
            defaults={
                "default_distance": calculator_setting("DEFAULT_DISTANCE"),
                "default_consumption": calculator_setting("DEFAULT_CONSUMPTION"),
                "default_price_per_liter": calculator_setting("DEFAULT_PRICE_PER_LITER"),
            },
        )
        return config

    def as_form_data(self):
        return {
            "distance": self.default_distance,
            "consumption": self.default_consumption,
            "price_per_liter": self.default_price_per_liter,
        }

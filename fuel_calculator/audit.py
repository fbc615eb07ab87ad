import logging

from .utils import calculator_setting, format_number


class AuditLog:
    """
    Writes one human-readable line per calculation, reset or settings change.

    Lines go to the logging channel named by FUEL_CALCULATOR['LOG_CHANNEL'].
    """

    def __init__(self, channel=None, currency=None):
        self.channel = channel
        self.currency = currency

    @property
    def logger(self):
        return logging.getLogger(self.channel or calculator_setting("LOG_CHANNEL"))

    def _currency(self):
        return self.currency or calculator_setting("CURRENCY")

    def calculation(self, username, ip, calculation_input, result):
        currency = self._currency()
        self.logger.info(
            "User %s with IP %s calculated the fuel cost for a distance of %s km, "
            "with a fuel consumption of %s l/100km and a price per liter of %s %s. "
            "The fuel spent was %s liters and the fuel cost was %s %s.",
            username,
            ip,
            format_number(calculation_input.distance),
            format_number(calculation_input.consumption),
            format_number(calculation_input.price_per_liter),
            currency,
            format_number(result.fuel_spent),
            format_number(result.fuel_cost),
            currency,
        )

    def reset(self, username, ip):
        self.logger.info("User %s with IP %s reset the form.", username, ip)

    def settings_saved(self, username, ip, calculator_settings):
        self.logger.info(
            "User %s with IP %s changed the calculator defaults: distance %s km, "
            "consumption %s l/100km, price per liter %s %s.",
            username,
            ip,
            format_number(calculator_settings.default_distance),
            format_number(calculator_settings.default_consumption),
            format_number(calculator_settings.default_price_per_liter),
            self._currency(),
        )

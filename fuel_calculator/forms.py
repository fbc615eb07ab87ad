from django import forms
from django.utils.translation import gettext_lazy as _

from .calculator import default_calculator
from .exceptions import CalculationError
from .models import CalculatorSettings
from .utils import calculator_setting


def decimal_input():
    # Text input so that a comma decimal separator reaches the calculator.
    return forms.TextInput(attrs={"inputmode": "decimal"})


class FuelCalculatorForm(forms.Form):
    """
    Trip figures for the interactive calculator.

    The fields are optional at the form level; presence, number format and
    range are checked by the calculator in clean(), which also stores the
    parsed input and the result on the form.
    """

    distance = forms.CharField(
        label=_("Distance travelled (km)"), required=False, widget=decimal_input()
    )
    consumption = forms.CharField(
        label=_("Fuel consumption (l/100km)"), required=False, widget=decimal_input()
    )
    price_per_liter = forms.CharField(
        label=_("Price per Liter"), required=False, widget=decimal_input()
    )

    def __init__(self, *args, calculator=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.calculator = calculator or default_calculator
        self.fields["price_per_liter"].label = _("Price per Liter (%(currency)s)") % {
            "currency": calculator_setting("CURRENCY")
        }
        self.calculation_input = None
        self.result = None

    def clean(self):
        cleaned_data = super().clean()
        try:
            self.calculation_input = self.calculator.validate(
                cleaned_data.get("distance"),
                cleaned_data.get("consumption"),
                cleaned_data.get("price_per_liter"),
            )
            self.result = self.calculator.calculate(self.calculation_input)
        except CalculationError as e:
            self.calculation_input = None
            self.add_error(e.field, e.describe(self.fields[e.field].label))
        return cleaned_data


class FuelCalculatorSettingsForm(forms.ModelForm):
    """Default trip figures, checked with the same rules as a calculation."""

    class Meta:
        model = CalculatorSettings
        fields = ["default_distance", "default_consumption", "default_price_per_liter"]
        widgets = {
            "default_distance": forms.NumberInput(attrs={"step": "any"}),
            "default_consumption": forms.NumberInput(attrs={"step": "0.1"}),
            "default_price_per_liter": forms.NumberInput(attrs={"step": "0.01"}),
        }

    def __init__(self, *args, calculator=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.calculator = calculator or default_calculator

    def clean(self):
        cleaned_data = super().clean()
        # Field-level errors (required, not a number) are already reported.
        if any(name in self.errors for name in self.Meta.fields):
            return cleaned_data

        try:
            self.calculator.compute(
                cleaned_data.get("default_distance"),
                cleaned_data.get("default_consumption"),
                cleaned_data.get("default_price_per_liter"),
            )
        except CalculationError as e:
            field = f"default_{e.field}"
            self.add_error(field, e.describe(self.fields[field].label))
        return cleaned_data

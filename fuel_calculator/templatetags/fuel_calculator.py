from django import template
from django.urls import reverse

from ..forms import FuelCalculatorForm
from ..models import CalculatorSettings

register = template.Library()


@register.inclusion_tag("fuel_calculator/block.html", takes_context=True)
def fuel_calculator_block(context):
    """
    Embed the calculator form on any page.

    The fields are prefilled with the stored defaults and the form posts
    to the calculator page, which shows the result.

    Usage:
        {% load fuel_calculator %}
        {% fuel_calculator_block %}
    """
    form = FuelCalculatorForm(initial=CalculatorSettings.load().as_form_data())
    return {
        "form": form,
        "action": reverse("fuel-calculator"),
        "csrf_token": context.get("csrf_token"),
    }

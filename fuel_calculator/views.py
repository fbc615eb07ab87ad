import enum
import logging
from collections.abc import Mapping

from django.contrib import messages
from django.contrib.auth.mixins import PermissionRequiredMixin
from django.shortcuts import redirect, render
from django.utils.translation import gettext_lazy as _
from django.views import View
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .audit import AuditLog
from .calculator import FIELD_NAMES, default_calculator
from .exceptions import CalculationError
from .forms import FuelCalculatorForm, FuelCalculatorSettingsForm
from .models import CalculatorSettings
from .utils import calculator_setting, format_number, get_client_ip, get_username

logger = logging.getLogger(__name__)


class FormState(str, enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    SHOWING_RESULT = "showing_result"
    RESET = "reset"


class FuelCalculatorView(View):
    """
    Interactive fuel calculator page.

    GET without a query string calculates the configured defaults.
    GET with distance, consumption and price_per_liter in the query string
    calculates those values. Any other query string only prefills the
    fields. POST calculates the submitted values, or clears the form when
    the 'reset' button was used.
    """

    template_name = "fuel_calculator/calculator_form.html"
    form_class = FuelCalculatorForm
    calculator = default_calculator
    audit_log = AuditLog()

    def get(self, request):
        query = request.GET
        config = CalculatorSettings.load()

        if not query:
            # Initial load: calculate the configured defaults.
            form = self.form_class(data=config.as_form_data(), calculator=self.calculator)
            return self.calculate(request, form)

        if all(name in query for name in FIELD_NAMES):
            form = self.form_class(data=query, calculator=self.calculator)
            return self.calculate(request, form)

        initial = config.as_form_data()
        initial.update({name: query[name] for name in FIELD_NAMES if name in query})
        form = self.form_class(initial=initial, calculator=self.calculator)
        return self.render_form(request, form, FormState.AWAITING_INPUT)

    def post(self, request):
        if "reset" in request.POST:
            return self.reset(request)

        form = self.form_class(data=request.POST, calculator=self.calculator)
        return self.calculate(request, form)

    def calculate(self, request, form):
        """
        Validate the bound form and show the result or the field errors.

        Args:
            request (HttpRequest): Current request.
            form (FuelCalculatorForm): Bound calculator form.

        Returns:
            HttpResponse: The rendered calculator page.
        """
        if not form.is_valid():
            return self.render_form(request, form, FormState.AWAITING_INPUT)

        self.audit_log.calculation(
            get_username(request.user),
            get_client_ip(request),
            form.calculation_input,
            form.result,
        )
        return self.render_form(request, form, FormState.SHOWING_RESULT, form.result)

    def reset(self, request):
        form = self.form_class(
            initial={name: 0 for name in FIELD_NAMES}, calculator=self.calculator
        )
        self.audit_log.reset(get_username(request.user), get_client_ip(request))
        return self.render_form(request, form, FormState.RESET)

    def render_form(self, request, form, state, result=None):
        currency = calculator_setting("CURRENCY")
        context = {
            "form": form,
            "state": state.value,
            "fuel_spent": "",
            "fuel_cost": "",
        }
        if result is not None:
            context["fuel_spent"] = f"{format_number(result.fuel_spent)} liters"
            context["fuel_cost"] = f"{format_number(result.fuel_cost)} {currency}"
        return render(request, self.template_name, context)


class FuelCalculatorSettingsView(PermissionRequiredMixin, View):
    """Edit the defaults that prefill the calculator form."""

    template_name = "fuel_calculator/settings_form.html"
    form_class = FuelCalculatorSettingsForm
    permission_required = "fuel_calculator.change_calculatorsettings"
    raise_exception = True
    calculator = default_calculator
    audit_log = AuditLog()

    def get(self, request):
        form = self.form_class(instance=CalculatorSettings.load(), calculator=self.calculator)
        return render(request, self.template_name, {"form": form})

    def post(self, request):
        form = self.form_class(
            data=request.POST, instance=CalculatorSettings.load(), calculator=self.calculator
        )
        if not form.is_valid():
            return render(request, self.template_name, {"form": form})

        config = form.save()
        self.audit_log.settings_saved(
            get_username(request.user), get_client_ip(request), config
        )
        messages.success(request, _("The configuration options have been saved."))
        return redirect("fuel-calculator-settings")


class FuelCalculatorAPIView(APIView):
    """
    API View to calculate the fuel spent on a trip and its cost.

    Expects POST data with:
        - distance: number, kilometers travelled (required, >= 0)
        - consumption: number, liters per 100 km (required, > 0)
        - price_per_liter: number, price of one liter (required, > 0)

    Returns:
        JSON response with fuel_spent and fuel_cost,
        or an error message with HTTP 400.
    """

    permission_classes = [AllowAny]
    calculator = default_calculator
    audit_log = AuditLog()

    def post(self, request):
        """
        Handle POST request to calculate the fuel cost.

        Validates input data, calls the calculator, writes the audit log
        line and returns the result or error response.

        Args:
            request (Request): DRF Request object containing POST data.

        Returns:
            Response: DRF Response object with JSON data and HTTP status.
        """
        try:
            data = request.data
        except ParseError as e:
            logger.warning("Rejected malformed fuel calculator request: %s", e)
            return Response(
                {"error": "The request body must be valid JSON."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except UnsupportedMediaType:
            return Response(
                {"error": "The request body must be sent as application/json."},
                status=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            )

        if not isinstance(data, Mapping):
            return Response(
                {"error": "The request body must be a JSON object."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            calculation_input = self.calculator.validate(
                data.get("distance"),
                data.get("consumption"),
                data.get("price_per_liter"),
            )
            result = self.calculator.calculate(calculation_input)
        except CalculationError as e:
            return Response({"error": e.message}, status=status.HTTP_400_BAD_REQUEST)

        self.audit_log.calculation(
            get_username(request.user),
            get_client_ip(request),
            calculation_input,
            result,
        )
        return Response(result.as_dict(), status=status.HTTP_200_OK)

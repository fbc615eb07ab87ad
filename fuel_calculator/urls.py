from django.urls import path
from .views import FuelCalculatorAPIView, FuelCalculatorSettingsView, FuelCalculatorView

"""
URL configuration for the fuel calculator.

Defines routes for the interactive form, its settings form and the JSON API.
"""

urlpatterns = [
    # Interactive calculator, accepts ?distance=&consumption=&price_per_liter=
    path('fuel-calculator/', FuelCalculatorView.as_view(), name='fuel-calculator'),
    # Default values used to prefill the calculator.
    path('fuel-calculator/settings/', FuelCalculatorSettingsView.as_view(), name='fuel-calculator-settings'),
    # API endpoint for fuel cost calculations.
    # Access via: POST /fuel-calculator-api
    path('fuel-calculator-api', FuelCalculatorAPIView.as_view(), name='fuel-calculator-api'),
]

import math
import re
from dataclasses import dataclass
from decimal import Decimal

from .exceptions import MissingParameter, NotNumeric, OutOfRange

# Validation order: the first failing field is the one reported.
FIELD_NAMES = ("distance", "consumption", "price_per_liter")

GREATER_THAN_ZERO = "must be greater than 0"
NOT_NEGATIVE = "must be greater than or equal to 0"
TOO_LARGE = "is too large"
RESULT_TOO_LARGE = "is too large to calculate with"

# Plain decimal notation, optionally signed, with an optional exponent.
NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class CalculationInput:
    distance: float
    consumption: float
    price_per_liter: float


@dataclass(frozen=True)
class CalculationResult:
    fuel_spent: float
    fuel_cost: float

    def as_dict(self):
        return {"fuel_spent": self.fuel_spent, "fuel_cost": self.fuel_cost}


def parse_number(field, value):
    """
    Convert a raw field value to a float.

    Args:
        field (str): Field name used in the raised error.
        value: None, str (a comma is accepted as decimal separator),
               int, float or Decimal.

    Returns:
        float: The parsed value.

    Raises:
        MissingParameter: If the value is None or a blank string.
        NotNumeric: If the value cannot be read as a finite number.
        OutOfRange: If the value does not fit in a float.
    """
    if value is None:
        raise MissingParameter(field)
    if isinstance(value, bool):
        raise NotNumeric(field)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise MissingParameter(field)
        text = text.replace(",", ".")
        if not NUMBER_RE.match(text):
            raise NotNumeric(field)
        value = text
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise NotNumeric(field)
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise NotNumeric(field)
    elif not isinstance(value, int):
        raise NotNumeric(field)

    try:
        number = float(value)
    except OverflowError:
        raise OutOfRange(field, TOO_LARGE) from None
    if not math.isfinite(number):
        raise OutOfRange(field, TOO_LARGE)
    # Adding 0.0 turns -0.0 into 0.0.
    return number + 0.0


class FuelCalculator:
    """
    Validates trip figures and computes the fuel spent and its cost.

    Distance may be zero (no trip); consumption and price per liter must be
    strictly positive. The calculator holds no state.
    """

    def validate(self, distance, consumption, price_per_liter):
        """
        Check the three raw values in field order and return them as numbers.

        Raises:
            CalculationError: For the first field that is missing,
                              not numeric or out of range.
        """
        distance = parse_number("distance", distance)
        if distance < 0:
            raise OutOfRange("distance", NOT_NEGATIVE)

        consumption = parse_number("consumption", consumption)
        if consumption <= 0:
            raise OutOfRange("consumption", GREATER_THAN_ZERO)

        price_per_liter = parse_number("price_per_liter", price_per_liter)
        if price_per_liter <= 0:
            raise OutOfRange("price_per_liter", GREATER_THAN_ZERO)

        return CalculationInput(distance, consumption, price_per_liter)

    def calculate(self, calculation_input):
        """
        Compute the fuel spent and its cost from validated input.

        Raises:
            OutOfRange: If the fuel spent or its cost overflows a float.
                        Overflow of the fuel spent is reported on the
                        larger of distance and consumption.
        """
        distance = calculation_input.distance
        consumption = calculation_input.consumption

        fuel_spent = distance * consumption / 100
        if not math.isfinite(fuel_spent):
            field = "distance" if distance >= consumption else "consumption"
            raise OutOfRange(field, RESULT_TOO_LARGE)

        fuel_cost = fuel_spent * calculation_input.price_per_liter
        if not math.isfinite(fuel_cost):
            raise OutOfRange("price_per_liter", RESULT_TOO_LARGE)

        return CalculationResult(fuel_spent=fuel_spent, fuel_cost=fuel_cost)

    def compute(self, distance, consumption, price_per_liter):
        """Validate the raw values and calculate the fuel spent and cost."""
        return self.calculate(self.validate(distance, consumption, price_per_liter))


default_calculator = FuelCalculator()


def compute(distance, consumption, price_per_liter):
    return default_calculator.compute(distance, consumption, price_per_liter)

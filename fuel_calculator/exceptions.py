"""
Validation errors raised by the fuel calculator.

Every error names the offending field and the rule it broke, so each
adapter can phrase it for its own surface (inline form error, JSON body).
"""


class CalculationError(ValueError):
    """Base exception for invalid calculator input."""

    rule = "is invalid"

    def __init__(self, field, rule=None):
        self.field = field
        if rule is not None:
            self.rule = rule
        self.message = f"The parameter {field} {self.rule}."
        super().__init__(self.message)

    def describe(self, label):
        """Phrase the error for a human-readable field label."""
        return f"{label} {self.rule}."


class MissingParameter(CalculationError):
    """The field is absent or blank."""

    rule = "is required"


class NotNumeric(CalculationError):
    """The field is present but is not a number."""

    rule = "must be a number"


class OutOfRange(CalculationError):
    """The field is a number outside the accepted bound."""

    def __init__(self, field, rule):
        super().__init__(field, rule)

from django.conf import settings

# Fallbacks for the FUEL_CALCULATOR setting
DEFAULTS = {
    "DEFAULT_DISTANCE": 100.0,
    "DEFAULT_CONSUMPTION": 6.5,
    "DEFAULT_PRICE_PER_LITER": 1.75,
    "CURRENCY": "EUR",
    "LOG_CHANNEL": "fuel_calculator",
}
ANONYMOUS_NAME = "Anonymous"


def calculator_setting(name):
    """
    Read an option from the FUEL_CALCULATOR setting.

    Args:
        name (str): Option key, e.g. 'CURRENCY'.

    Returns:
        The configured value, or the built-in default if not configured.
    """
    options = getattr(settings, "FUEL_CALCULATOR", {})
    return options.get(name, DEFAULTS[name])


def get_client_ip(request):
    """
    Return the client IP address of the request.

    Honours the first X-Forwarded-For entry only when
    FUEL_CALCULATOR['TRUST_FORWARDED_FOR'] is enabled.
    """
    options = getattr(settings, "FUEL_CALCULATOR", {})
    if options.get("TRUST_FORWARDED_FOR"):
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "")


def get_username(user):
    """Username of an authenticated user, otherwise 'Anonymous'."""
    if user is not None and user.is_authenticated:
        return user.get_username()
    return ANONYMOUS_NAME


def format_number(value):
    """
    Format a number for display without rounding it.

    Uses the shortest representation that round-trips and drops a
    trailing '.0', so 5.0 shows as '5' and 7.5 as '7.5'.
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text

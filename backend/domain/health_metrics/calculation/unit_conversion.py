"""Imperial to metric conversions for health form input."""

CM_PER_INCH = 2.54
KG_PER_POUND = 0.453592


def feet_inches_to_cm(feet: float, inches: float = 0.0) -> float:
    """Convert a height in feet and inches to centimeters.

    Example:
        >>> round(feet_inches_to_cm(5, 10), 1)
        177.8
    """
    return (feet * 12 + inches) * CM_PER_INCH


def pounds_to_kg(pounds: float) -> float:
    """Convert a weight in pounds to kilograms."""
    return pounds * KG_PER_POUND

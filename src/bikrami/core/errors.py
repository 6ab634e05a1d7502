class BikramiError(Exception):
    """Base error."""

class InvalidLocationError(BikramiError, ValueError):
    """Raised when a latitude/longitude pair is outside the valid range."""

class OutOfRangeAstronomicalValueError(BikramiError):
    """Raised when a derived month or nakshatra index falls outside its table."""

class InvalidDateError(BikramiError, ValueError):
    """Raised for a calendar date that does not exist or falls outside years 1..9999 (Gregorian)."""

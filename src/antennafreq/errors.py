"""Exceptions and warning categories raised by antennafreq."""


class ValidationError(ValueError):
    """Raised when antennas or constraints handed to the package are invalid."""


class ConstraintDroppedWarning(UserWarning):
    """A constraint was ignored because it referenced an unknown or identical antenna."""

class UserError(ValueError):
    """
    A known error that should be shown to the user as a message.
    """


class ValidationError(UserError):
    """
    Validation error in matrix structure or split configuration
    """


class InvalidRecordError(ValidationError):
    """
    Requested record is not an integer greater or equal to one
    """


class InvalidSortDirectionError(ValidationError):
    """
    Sort direction is not a boolean value
    """

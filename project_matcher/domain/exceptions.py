"""Domain layer exceptions."""


class RecordFormatError(Exception):
    """Raised when a raw email or project record cannot be adapted.

    Examples:
    - Record is not a mapping (e.g. a list or a bare string)
    - A text field holds a number, list or nested object
    - A project's ``properties`` value is neither a mapping nor null
    """

    pass

"""Exception hierarchy for localizemessages.

Only programming and configuration defects are raised as exceptions.
Missing resources and malformed resource templates are recoverable: the
localizer logs them and falls back to the inline message.

Python 3.13+. Zero external dependencies.
"""


class LocalizeError(Exception):
    """Base exception for all localizemessages errors."""


class LocalizeKeyError(LocalizeError):
    """Localize key composition produced no parts.

    Raised when the class, method and local-key parts are all absent
    (None or empty). This is a programming mistake at the call site and is
    never retried or logged.
    """


class LocalizerConfigurationError(LocalizeError, ValueError):
    """Localizer configuration is invalid or incomplete.

    Examples:
    - Default culture is None, empty or whitespace
    - DefaultLocalizerFactory created without options
    - Catalog path template without a {locale} placeholder

    Subclasses ValueError so callers validating input can catch it generically.
    """


class ResourceNotFoundError(LocalizeError, KeyError):
    """Resource entry missing from a strict in-memory localizer.

    Raised only by DictStringLocalizer(raise_on_missing=True), which is used
    in unit tests to fail loudly on a wrong localize key.

    Attributes:
        name: The localize key that was looked up
    """

    def __init__(self, name: str) -> None:
        """Initialize ResourceNotFoundError.

        Args:
            name: The localize key that was looked up
        """
        self.name = name
        super().__init__(f"There was no entry with the name '{name}' in the dictionary.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])

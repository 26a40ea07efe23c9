"""argumend custom exceptions.

Exception Design Principles:
1. The matching engine is total and raises nothing of its own
2. Errors live at the call-validation boundary, where the context is known
3. Split on domain of actionable information:
   - Unrecoverable except by code changes (ArguMendLoadError)
   - Recoverable by the caller fixing the call site (UnsupportedKeywordError)
"""


class ArguMendError(Exception):
    """Base exception for all argumend errors.

    Carries the per-item error messages and the suggested replacements
    alongside the summary message.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] = None,  # detailed list of errors (if available)
        suggestions: list[str] = None,  # remedial actions
        context: dict = None,  # additional detailed context
    ):
        """Initialize ArguMendError.

        Args:
            message: Primary error message for users
            errors: List of specific error details
            suggestions: List of suggested replacements or actions
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class ArguMendLoadError(ArguMendError):
    """A function definition cannot be wrapped by @argumend.

    Raised at decoration time, so it surfaces on import of the module that
    defines the function:
    - The signature has no parameter that can be passed by keyword
    - The signature collects arbitrary keywords with **kwargs

    Requires a change to the function definition. Not recoverable at runtime.
    """

    pass


class UnsupportedKeywordError(ArguMendError, TypeError):
    """A call passed keyword names the function does not accept.

    Subclasses TypeError so handlers written for Python's own "unexpected
    keyword argument" error still catch it. `errors` holds one message per
    unknown name; `suggestions` holds the close valid names in rank order.
    """

    pass

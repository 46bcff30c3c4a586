"""Root of the mvcmodel exception hierarchy."""


class MvcModelError(Exception):
    """
    Base exception for all mvcmodel errors.

    `str(error)` is the short message; the technical message carries the
    encoder/decoder details and is what the library logs.

    Attributes:
        user_message: Short description of what failed
        technical_message: Detailed message for logs (defaults to user_message)
        recovery_hint: What the caller can change to avoid the error
    """

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        recovery_hint: str | None = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        if self.recovery_hint:
            return f"{self.user_message} ({self.recovery_hint})"
        return self.user_message

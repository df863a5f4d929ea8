class SuggestionFailedError(RuntimeError):
    """The suggestion call failed as a whole; nothing should be applied."""

    default_message = "Failed to get suggestions from the AI provider."

    def __init__(self, message: str = default_message):
        super().__init__(message)

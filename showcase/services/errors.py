"""
Service-level errors
"""


class ValidationError(ValueError):
    """Raised when visitor or admin input is rejected before any write."""

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__('; '.join(self.messages))

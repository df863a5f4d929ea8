class EditSessionError(Exception):
    """Base class for edit-session errors."""


class UnknownFieldError(EditSessionError, ValueError):
    def __init__(self, field_name: str):
        super().__init__(f"Unknown profile field: {field_name!r}")
        self.field_name = field_name


class SessionNotFoundError(EditSessionError, LookupError):
    def __init__(self, session_id: str):
        super().__init__(f"Edit session not found: {session_id}")
        self.session_id = session_id


class SourceUserNotFoundError(EditSessionError, LookupError):
    def __init__(self, user_id: int):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id

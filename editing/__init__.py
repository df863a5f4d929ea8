from editing import exceptions
from editing import session

from editing.exceptions import (EditSessionError, SessionNotFoundError,
                                SourceUserNotFoundError, UnknownFieldError,)
from editing.session import (EditSession, PermissionSet, SessionMode,)

__all__ = ['EditSession', 'EditSessionError', 'PermissionSet',
           'SessionMode', 'SessionNotFoundError', 'SourceUserNotFoundError',
           'UnknownFieldError', 'exceptions', 'session']

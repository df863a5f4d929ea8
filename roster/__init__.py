from roster import filters
from roster import models
from roster import repository

from roster.filters import (filter_users,)
from roster.models import (Permission, User, UserStatus,)
from roster.repository import (RosterStore, load_roster,)

__all__ = ['Permission', 'RosterStore', 'User', 'UserStatus', 'filter_users',
           'filters', 'load_roster', 'models', 'repository']

"""
Booking domain package.

Public API:
- Models: Place, Role, Selection, SelectionState
- Session: BookingSession, BookingOptions, FareSummary
- Search: SearchController
- Errors: BookingError, IncompleteSelectionError, RouteUnavailableError
"""
from .models import Place, Role, Selection, SelectionState
from .errors import BookingError, IncompleteSelectionError, RouteUnavailableError
from .inputs import BookingOptions
from .summary import FareSummary
from .session import BookingSession
from .search import SearchController

__all__ = ["Place",
           "Role",
             "Selection",
               "SelectionState",
               "BookingError",
               "IncompleteSelectionError",
               "RouteUnavailableError",
               "BookingOptions",
               "FareSummary",
               "BookingSession",
               "SearchController",
               ]

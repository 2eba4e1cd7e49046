class BookingError(Exception):
    """Base class for errors surfaced to the rider during booking."""
    pass


class IncompleteSelectionError(BookingError):
    """Raised when booking is attempted without both pickup and drop set."""
    pass


class RouteUnavailableError(BookingError):
    """Raised when the routing provider fails or finds no route."""
    pass

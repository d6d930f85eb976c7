class BookingApiError(RuntimeError):
    """Raised when the booking backend fails (timeouts, network errors, non-2xx responses)."""
    pass


class BookingContractError(RuntimeError):
    """Raised when the booking backend answers with a payload we cannot read."""
    pass

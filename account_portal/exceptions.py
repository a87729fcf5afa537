"""Account portal exceptions."""

GENERIC_SERVER_ERROR = "Internal server error"
GENERIC_TRANSPORT_ERROR = "An error occurred. Please try again"


class PortalError(Exception):
    """Base exception for all account portal errors."""

    pass


class FormValidationError(PortalError):
    """Field-scoped validation failure raised by a form before any request is sent."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{field}: {msg}" for field, msg in self.errors.items()))


class BusinessRuleError(PortalError):
    """Server-side rejection of a request, reported to the caller as a 400."""

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        self.message = message
        self.errors = errors
        super().__init__(message)


class TransportError(PortalError):
    """The request never produced a usable response (network failure, timeout)."""

    pass


class ServerFault(PortalError):
    """Unexpected server-side failure such as an unparseable request body."""

    pass

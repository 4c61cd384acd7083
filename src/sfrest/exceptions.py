class SfRestError(RuntimeError):
    """Base class for errors raised by sfrest itself (not by the transport)."""


class NoSessionError(SfRestError):
    """Raised when a request is built without a session token."""

    def __init__(self, message: str = "No token supplied to connect to API."):
        super().__init__(message)


class InvalidKeyError(SfRestError, ValueError):
    """Raised when an upsert is attempted with the primary Id as the alternate key."""

    def __init__(self, obj: str):
        self.obj = obj
        super().__init__(f"Cannot upsert {obj} by internal Salesforce Id; use update_object instead.")


class MissingCredentialsError(SfRestError):
    """Raised when the required Salesforce env vars are not present."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__("Missing required environment variables: " + ", ".join(missing))


class AuthFlowError(SfRestError):
    """Raised when SF_AUTH_FLOW names a flow we do not implement."""

    def __init__(self, flow: str):
        self.flow = flow
        super().__init__(f"Unsupported SF_AUTH_FLOW: {flow!r}")

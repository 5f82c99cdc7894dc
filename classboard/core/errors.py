# /classboard/core/errors.py

"""
Tagged errors raised by the service layer and translated to HTTP responses by
the routers. The reporting engine itself never raises; every failure a caller
can see originates in parameter checks, identity, authorization or the store.
"""


class ReportError(Exception):
    """Base class. `status_code` is the HTTP status the router should return."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(ReportError):
    status_code = 400


class UnauthenticatedError(ReportError):
    status_code = 401


class ClassAccessDeniedError(ReportError):
    status_code = 404


class StoreAccessError(ReportError):
    status_code = 500

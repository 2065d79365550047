from fastapi import status

from civicgate.domain.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Shared mapping of business error codes to HTTP statuses
ERROR_STATUS = {
    "AUTHENTICATION_REQUIRED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "FEATURE_NOT_AVAILABLE": status.HTTP_403_FORBIDDEN,
    "ACCOUNT_BLOCKED": status.HTTP_423_LOCKED,
    "INVALID_TOKEN": status.HTTP_400_BAD_REQUEST,
    "INVALID_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "INVALID_ANONYMOUS_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_TIERS": status.HTTP_400_BAD_REQUEST,
    "ELECTED_OFFICIAL_INACTIVE": status.HTTP_400_BAD_REQUEST,
    "ELECTED_OFFICIAL_EMAIL_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ASSOCIATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ADDON_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ELECTED_OFFICIAL_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error, **overrides: int):
    """
    Raise the HTTP-mapped exception for a use case error.

    Codes absent from ERROR_STATUS (and ``overrides``) are server errors:
    catalog defects such as CATALOG_MISCONFIGURED or PLAN_NOT_FOUND.
    """
    status_code = overrides.get(error.code, ERROR_STATUS.get(error.code))
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)

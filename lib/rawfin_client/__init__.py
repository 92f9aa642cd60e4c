from .client import RawfinClient
from .errors import ApiError, RawfinClientError, ResponseDecodeError, SessionChangedError
from .results import Failure, Ok

__all__ = [
    "RawfinClient",
    "ApiError",
    "RawfinClientError",
    "ResponseDecodeError",
    "SessionChangedError",
    "Ok",
    "Failure",
]

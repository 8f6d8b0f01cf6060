from enum import Enum


class Operation(Enum):
    BUY = "buy"
    SELL = "sell"
    CREATE = "create"

    @property
    def endpoint(self) -> str:
        return f"/{self.value}"


class KeyState(Enum):
    UNINITIALIZED = "Uninitialized"
    FETCHING_KEY = "FetchingKey"
    READY = "Ready"


class ErrorKind(Enum):
    VALIDATION = "ValidationError"
    KEY_INIT = "KeyInitError"
    API = "ApiError"
    NO_RESPONSE = "NoResponseError"
    REQUEST = "RequestError"

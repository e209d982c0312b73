from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class WeatherError(Exception):
    """Base class for failures talking to the NWS API."""


class NetworkFailure(WeatherError):
    """The request raised, the body was not JSON, or the status was not 2xx."""


class MissingData(WeatherError):
    """The response parsed but an expected field or list was absent or empty."""


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: WeatherError

    @property
    def is_missing_data(self) -> bool:
        return isinstance(self.error, MissingData)


# `Result[T]` reads as "Success[T] or Failure"; callers branch with isinstance.
Result = Success[Any] | Failure

"""Normalised outcomes of a Hive Intelligence query."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union


class QueryStatus(str, Enum):
    MOCKED = "mocked"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class MockedResult:
    """Placeholder answer returned when no credential is configured."""

    query: str
    explanatory_text: str
    status: QueryStatus = field(default=QueryStatus.MOCKED, init=False)


@dataclass(frozen=True, slots=True)
class SuccessResult:
    """Answer produced by a 2xx response with a JSON body."""

    query: str
    result_text: str
    data_sources: Tuple[str, ...] = ()
    status: QueryStatus = field(default=QueryStatus.SUCCESS, init=False)


@dataclass(frozen=True, slots=True)
class FailedResult:
    """Transport failure, non-2xx status or undecodable body."""

    query: str
    error_message: str
    status: QueryStatus = field(default=QueryStatus.ERROR, init=False)


QueryResult = Union[MockedResult, SuccessResult, FailedResult]

__all__ = ["FailedResult", "MockedResult", "QueryResult", "QueryStatus", "SuccessResult"]

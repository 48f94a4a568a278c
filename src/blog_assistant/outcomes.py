"""Outcome variants for a single blog API exchange."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Server answered with the expected status and a decodable body."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Server answered with any status other than the expected one."""

    status_code: int
    body: str


@dataclass(frozen=True)
class TransportFault:
    """The exchange failed below HTTP (connect, timeout, redirect loop)."""

    cause: httpx.RequestError
    url: str


@dataclass(frozen=True)
class DecodeFault:
    """Expected status, but the body does not match the response shape."""

    cause: ValidationError
    body: str


Outcome = Success[T] | Failure | TransportFault | DecodeFault

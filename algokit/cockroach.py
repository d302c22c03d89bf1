"""Recording cockroach sightings and announcing them."""

from __future__ import annotations

import itertools
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from http import HTTPStatus
from typing import Any, Mapping, NamedTuple, Protocol

log = logging.getLogger(__name__)

UINT32_MAX = 2**32 - 1
NOTIFICATION_TITLE = "Cockroach Detected 🪳 !!!"


def _check_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"amount must be an integer, got {amount!r}")
    if not 0 <= amount <= UINT32_MAX:
        raise ValueError(f"amount must be between 0 and {UINT32_MAX}, got {amount}")


@dataclass
class AddCockroachData:
    """Request body for reporting a sighting."""

    amount: int = 0

    def __post_init__(self) -> None:
        _check_amount(self.amount)


@dataclass
class InsertCockroachDto:
    """Data handed to the repository for storage."""

    id: int = 0
    amount: int = 0
    created_at: datetime | None = None


@dataclass
class Cockroach:
    """A stored sighting."""

    id: int
    amount: int
    created_at: datetime


@dataclass
class CockroachPushNotification:
    """Notification sent when cockroaches are detected."""

    title: str
    amount: int
    reported_time: datetime


class CockroachRepository:
    """In-memory store of sightings with auto-incrementing ids."""

    def __init__(self) -> None:
        self._rows: list[Cockroach] = []
        self._ids = itertools.count(1)

    def insert(self, data: InsertCockroachDto) -> Cockroach:
        """Store a sighting of ``data.amount`` cockroaches and return it."""
        row = Cockroach(
            id=next(self._ids),
            amount=data.amount,
            created_at=datetime.now().astimezone(),
        )
        self._rows.append(row)
        log.debug("InsertCockroachData: %d", 1)
        return row

    @property
    def rows(self) -> list[Cockroach]:
        """Stored sightings in insertion order."""
        return list(self._rows)


class CockroachMessaging(Protocol):
    """Anything that can deliver a push notification."""

    def push_notification(self, message: CockroachPushNotification) -> None: ...


class _Store(Protocol):
    def insert(self, data: InsertCockroachDto) -> Any: ...


class LoggingMessaging:
    """Messaging that logs each notification and keeps a record of it."""

    def __init__(self) -> None:
        self.sent: list[CockroachPushNotification] = []

    def push_notification(self, message: CockroachPushNotification) -> None:
        """Log ``message`` as pushed."""
        self.sent.append(message)
        log.debug("Pushed notification with data: %r", message)


class CockroachUsecase:
    """Stores a sighting, then announces it."""

    def __init__(self, repository: _Store, messaging: CockroachMessaging) -> None:
        self.repository = repository
        self.messaging = messaging

    def process(self, data: AddCockroachData) -> None:
        """Record ``data``; errors from storage or messaging propagate."""
        self.repository.insert(InsertCockroachDto(amount=data.amount))
        self.messaging.push_notification(
            CockroachPushNotification(
                title=NOTIFICATION_TITLE,
                amount=data.amount,
                reported_time=datetime.now().astimezone(),
            )
        )


class Response(NamedTuple):
    """Status and JSON body of a handler reply."""

    status: HTTPStatus
    body: dict[str, str]


def _response(status: HTTPStatus, message: str) -> Response:
    return Response(status, {"message": message})


def _bind(body: str | bytes | Mapping[str, Any] | None) -> AddCockroachData:
    """Decode a request body, accepting JSON text or an already decoded mapping."""
    if body is None or (isinstance(body, (str, bytes, bytearray)) and not body):
        return AddCockroachData()
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8")
    payload = json.loads(body) if isinstance(body, str) else body
    if payload is None:
        return AddCockroachData()
    if not isinstance(payload, Mapping):
        raise ValueError("request body must be a JSON object")
    amount = 0
    for key, value in payload.items():
        if not isinstance(key, str) or key.lower() != "amount" or value is None:
            continue
        _check_amount(value)
        amount = value
    return AddCockroachData(amount)


class CockroachHandler:
    """HTTP-facing entry point for sighting reports."""

    def __init__(self, usecase: CockroachUsecase) -> None:
        self.usecase = usecase

    def detect(self, body: str | bytes | Mapping[str, Any] | None) -> Response:
        """Handle a report and return the status and message to send back."""
        try:
            data = _bind(body)
        except ValueError as exc:
            log.error("Error binding request body: %s", exc)
            return _response(HTTPStatus.BAD_REQUEST, "Bad request")
        try:
            self.usecase.process(data)
        except Exception as exc:
            log.error("Processing data failed: %s", exc)
            return _response(HTTPStatus.INTERNAL_SERVER_ERROR, "Processing data failed")
        return _response(HTTPStatus.OK, "Success 🪳🪳🪳")
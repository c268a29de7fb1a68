from typing import Any, Dict

import msgspec

from .models import JobRecord
from .protocols import JobRegistryProtocol


class Ticket:
    """
    A thin, registry-backed handle to a job.

    A ticket holds nothing but the job id and the registry to ask. Every
    accessor performs a fresh ``find`` so callers always see the
    registry's current view of the job, and whatever the registry raises
    (``JobNotFoundError`` for a missing record) reaches the caller as-is.

    Tickets satisfy the ``JobHandle`` protocol and can be handed straight
    to a ``StatusRenderer``.
    """

    __slots__ = ("_id", "_registry")

    def __init__(
        self,
        job_id: str,
        registry: JobRegistryProtocol,
    ):
        self._id = job_id
        self._registry = registry

    @property
    def id(self) -> str:
        return self._id

    @property
    def result(self) -> Any | None:
        return self._record().result

    @property
    def state(self):
        return self._record().state

    @property
    def status(self) -> str:
        return self._record().status

    @property
    def type(self) -> str:
        return self._record().type

    def is_completed(self) -> bool:
        return self._record().is_completed()

    def is_failed(self) -> bool:
        return self._record().is_failed()

    def serialize(self) -> Dict[str, Any]:
        # One lookup so every field comes from the same point in time.
        record = self._record()

        return {
            "id": self._id,
            "result": record.result,
            "state": record.state,
            "status": record.status,
            "type": record.type,
        }

    def to_json(self) -> bytes:
        return msgspec.json.encode(self.serialize())

    def _record(self) -> JobRecord:
        return self._registry.find(self._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ticket):
            return NotImplemented

        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Ticket(id={self._id!r})"

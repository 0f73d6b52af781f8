"""Application todos – OwnerDirectory port for owner display details."""

from __future__ import annotations

import abc
import dataclasses
from typing import Iterable, Mapping


@dataclasses.dataclass(frozen=True)
class OwnerInfo:
    """Display details of a todo's owner.  Never used for access decisions."""

    name: str
    email: str = ""


UNKNOWN_OWNER = OwnerInfo(name="Unknown")


class OwnerDirectory(abc.ABC):
    """Port — user profile lookup, backed by whatever store holds accounts."""

    @abc.abstractmethod
    async def lookup(self, owner_ids: Iterable[str]) -> Mapping[str, OwnerInfo]:
        """Return details for the ids that are known; unknown ids are left out."""


class InMemoryOwnerDirectory(OwnerDirectory):
    def __init__(self, owners: Mapping[str, OwnerInfo] | None = None) -> None:
        self._owners = dict(owners or {})

    async def lookup(self, owner_ids: Iterable[str]) -> Mapping[str, OwnerInfo]:
        return {i: self._owners[i] for i in owner_ids if i in self._owners}


__all__ = ["InMemoryOwnerDirectory", "OwnerDirectory", "OwnerInfo", "UNKNOWN_OWNER"]

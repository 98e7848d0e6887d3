"""
Aggregate Guard
===============

Per-aggregate-root locking used by the facade to serialize conflicting
updates.

Each aggregate key (("user", id), ("amenity", id), ("place", id)) maps to a
reader/writer lock. Mutations take the exclusive section for the whole
validate -> write -> recompute sequence; reads of an aggregate take the
shared section so they never see a half-applied unit of work. Work on
disjoint aggregates never contends.

Unique-value reservations ("unique", "email:a@x.com") use the same
machinery so a uniqueness check and the write that relies on it cannot
interleave with a competing one.

Locks are always acquired in one global order (unique values, users,
amenities, then places, each by id), also when a holder of a user lock
later takes place locks, so two units of work never wait on each other
in a cycle.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from hbnb.domain.exceptions import ConcurrencyError

logger = logging.getLogger(__name__)

AggregateKey = Tuple[str, str]

UNIQUE = "unique"
USER = "user"
AMENITY = "amenity"
PLACE = "place"

AGGREGATE_ORDER = {UNIQUE: 0, USER: 1, AMENITY: 2, PLACE: 3}


def unique_key(namespace: str, value: str) -> AggregateKey:
    """Key reserving a unique value (an email, an amenity name) while it is checked and written."""
    return (UNIQUE, f"{namespace}:{value.lower()}")


def user_key(user_id: str) -> AggregateKey:
    return (USER, user_id)


def amenity_key(amenity_id: str) -> AggregateKey:
    return (AMENITY, amenity_id)


def place_key(place_id: str) -> AggregateKey:
    return (PLACE, place_id)


class ReadWriteLock:
    """
    Many readers or one writer. Waiting writers block new readers so a
    steady stream of reads cannot starve a mutation.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self, timeout: float) -> bool:
        with self._condition:
            acquired = self._condition.wait_for(
                lambda: not self._writer and self._waiting_writers == 0, timeout
            )
            if acquired:
                self._readers += 1
            return acquired

    def release_read(self) -> None:
        with self._condition:
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self, timeout: float) -> bool:
        with self._condition:
            self._waiting_writers += 1
            try:
                acquired = self._condition.wait_for(
                    lambda: not self._writer and self._readers == 0, timeout
                )
            finally:
                self._waiting_writers -= 1
            if acquired:
                self._writer = True
            else:
                self._condition.notify_all()
            return acquired

    def release_write(self) -> None:
        with self._condition:
            self._writer = False
            self._condition.notify_all()


class AggregateGuard:
    """
    Registry of aggregate locks.

    Locks are created on demand and dropped once nobody holds or waits on
    them, so the registry only grows with the number of aggregates in use.
    """

    def __init__(self, timeout_seconds: float = 10.0):
        self._timeout = timeout_seconds
        self._registry_lock = threading.Lock()
        self._locks: Dict[AggregateKey, List] = {}  # key -> [lock, users]

    @staticmethod
    def _ordered(keys) -> List[AggregateKey]:
        return sorted(set(keys), key=lambda key: (AGGREGATE_ORDER[key[0]], key[1]))

    def _checkout(self, key: AggregateKey) -> ReadWriteLock:
        with self._registry_lock:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [ReadWriteLock(), 0]
            entry[1] += 1
            return entry[0]

    def _checkin(self, key: AggregateKey) -> None:
        with self._registry_lock:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    def active_keys(self) -> List[AggregateKey]:
        """Keys currently held or waited on."""
        with self._registry_lock:
            return list(self._locks)

    @contextmanager
    def _section(self, keys, exclusive: bool) -> Iterator[None]:
        held: List[Tuple[AggregateKey, ReadWriteLock]] = []
        try:
            for key in self._ordered(keys):
                lock = self._checkout(key)
                acquired = lock.acquire_write(self._timeout) if exclusive else lock.acquire_read(self._timeout)
                if not acquired:
                    self._checkin(key)
                    logger.warning(f"Timed out after {self._timeout}s waiting for {key[0]} '{key[1]}'")
                    raise ConcurrencyError(
                        key[0], key[1], f"Timed out waiting for {key[0]} '{key[1]}'"
                    )
                held.append((key, lock))
            yield
        finally:
            for key, lock in reversed(held):
                if exclusive:
                    lock.release_write()
                else:
                    lock.release_read()
                self._checkin(key)

    def exclusive(self, *keys: AggregateKey):
        """Hold the write lock of every key for the duration of the block."""
        return self._section(keys, exclusive=True)

    def shared(self, *keys: AggregateKey):
        """Hold the read lock of every key for the duration of the block."""
        return self._section(keys, exclusive=False)

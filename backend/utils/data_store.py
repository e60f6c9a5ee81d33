# backend/utils/data_store.py

import threading
from contextlib import contextmanager
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from models.property_models import Property


class ReadWriteLock:
    """
    Many readers or one writer.
    Once a writer is waiting, new readers queue behind it.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class PropertyStore:
    """
    In-memory id -> Property map for the lifetime of the process.
    The only mutation is replace_all; readers always see one complete upload.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._db: Mapping[int, Property] = MappingProxyType({})

    def replace_all(self, properties: Iterable[Property]) -> None:
        # Build the new map before taking the lock so the swap itself is instant.
        new_db = MappingProxyType({prop.id: prop for prop in properties})
        with self._lock.write():
            self._db = new_db

    def list_all(self) -> Tuple[Property, ...]:
        with self._lock.read():
            db = self._db
        return tuple(db[key] for key in sorted(db))

    def get(self, property_id: int) -> Optional[Property]:
        with self._lock.read():
            return self._db.get(property_id)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._db)

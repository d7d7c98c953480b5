#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Reader/writer lock and a wrapper that keeps the lock apart from the data.

- 읽기: 여러 스레드 동시 허용 (렌더 스냅샷)
- 쓰기: 단독 (엔진 틱 전체)
- 대기 중인 writer가 있으면 새 reader는 기다린다
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ReadWriteLock:
    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class SharedState(Generic[T]):
    """Owns a value and hands it out only inside a read or write scope."""

    def __init__(self, value: T, lock: ReadWriteLock | None = None):
        self._value = value
        self.lock = lock or ReadWriteLock()

    @contextmanager
    def read_lock(self) -> Iterator[T]:
        with self.lock.read_locked():
            yield self._value

    @contextmanager
    def write_lock(self) -> Iterator[T]:
        with self.lock.write_locked():
            yield self._value

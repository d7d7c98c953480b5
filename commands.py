#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Engine commands and the bounded command queue.

명령은 불변 값 객체이며, 큐에 넣는 순간 소유권이 엔진으로 넘어간다.
"""

from __future__ import annotations

import queue
from dataclasses import dataclass
from typing import List, Union

from catalogs import GameConfig
from config import COMMAND_QUEUE_CAPACITY
from model import Direction


@dataclass(frozen=True)
class NewGame:
    config: GameConfig


@dataclass(frozen=True)
class Click:
    x: int  # click coordinates in the labyrinth (pixels)
    y: int
    left: bool = True
    right: bool = False


@dataclass(frozen=True)
class KeyDirection:
    direction: Direction


Command = Union[NewGame, Click, KeyDirection]


class CommandQueue:
    """Bounded FIFO between producers (any thread) and the engine loop."""

    def __init__(self, capacity: int = COMMAND_QUEUE_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"command queue capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=capacity)

    def put(self, command: object) -> None:
        """Enqueue; blocks while the queue is full."""
        self._queue.put(command)

    def drain(self) -> List[object]:
        """Take every command queued right now, oldest first, without blocking."""
        out: List[object] = []
        while True:
            try:
                out.append(self._queue.get_nowait())
            except queue.Empty:
                return out

    def __len__(self) -> int:
        return self._queue.qsize()

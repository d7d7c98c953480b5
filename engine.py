#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Maze chase engine.

`run_loop()` is meant to run on its own thread (see `run_in_thread()`); other
threads control it only through the command queue and observe it only through
`snapshot()` / `frame()`.
"""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager
from random import Random
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from catalogs import DEFAULT_CATALOGS, Catalogs, GameConfig
from commands import Click, CommandQueue, KeyDirection, NewGame
from config import BLOCK_SIZE, CAPTURE_DISTANCE_FACTOR, COMMAND_QUEUE_CAPACITY, PATH_QUEUE_CAPACITY
from locking import SharedState
from maze_generation import generate_maze
from model import Direction, GameState, MovingObject, Point, cell_center
from player_control import PlayerController
from pursuer_behavior import PursuerBehavior

logger = logging.getLogger(__name__)


class ActorFrame(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: float
    y: float
    direction: Direction
    target_x: int
    target_y: int

    @classmethod
    def of(cls, obj: MovingObject) -> "ActorFrame":
        return cls(x=obj.x, y=obj.y, direction=obj.direction, target_x=obj.target_x, target_y=obj.target_y)


class FrameSnapshot(BaseModel):
    """Values one rendered frame needs, copied out under the read lock."""

    model_config = ConfigDict(extra="forbid")

    generation: int
    rows: int
    cols: int
    exit_x: int
    exit_y: int
    player: ActorFrame
    pursuers: List[ActorFrame] = Field(default_factory=list)
    pending_targets: List[Point] = Field(default_factory=list)
    dead: bool = False
    won: bool = False
    ticks: int = 0
    grid: Optional[List[List[int]]] = None


class Engine:
    """Runs the fixed-tick simulation and owns the game state."""

    def __init__(
        self,
        invalidate: Optional[Callable[[], None]] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[Random] = None,
        catalogs: Catalogs = DEFAULT_CATALOGS,
        config: Optional[GameConfig] = None,
        command_capacity: int = COMMAND_QUEUE_CAPACITY,
        path_capacity: int = PATH_QUEUE_CAPACITY,
    ):
        self.rng = rng if rng is not None else Random(seed)
        self.catalogs = catalogs
        self.invalidate = invalidate
        self.commands = CommandQueue(command_capacity)
        self.player_control = PlayerController(path_capacity=path_capacity)
        self.pursuer_behavior = PursuerBehavior(self.rng)
        self.shared: SharedState[GameState] = SharedState(GameState())
        self.config: GameConfig = config or catalogs.default_config()
        self._stop_requested = threading.Event()
        self._thread: Optional[threading.Thread] = None

        with self.shared.write_lock() as state:
            self._init_new_game(state, self.config)

    @classmethod
    def start(cls, invalidate: Optional[Callable[[], None]], **kwargs) -> "Engine":
        """Create an engine with the default game already set up.

        The loop is not started here; call `run_in_thread()` (or `run_loop()`
        on a thread you own) afterwards.
        """
        return cls(invalidate, **kwargs)

    # ------------------------------------------------------------------
    # Command submission (any thread)
    # ------------------------------------------------------------------
    def submit(self, command: object) -> None:
        self.commands.put(command)

    def submit_new_game(self, config: GameConfig) -> None:
        self.submit(NewGame(config))

    def submit_click(self, x: int, y: int, left: bool = True, right: bool = False) -> None:
        self.submit(Click(x=int(x), y=int(y), left=left, right=right))

    def submit_key(self, direction: Direction) -> None:
        self.submit(KeyDirection(direction))

    # ------------------------------------------------------------------
    # Read access (presentation layer)
    # ------------------------------------------------------------------
    def snapshot(self) -> AbstractContextManager[GameState]:
        """Read-locked view of the game state: ``with engine.snapshot() as state: ...``"""
        return self.shared.read_lock()

    def frame(self, include_grid: bool = False) -> FrameSnapshot:
        with self.shared.read_lock() as state:
            return FrameSnapshot(
                generation=state.generation,
                rows=state.rows,
                cols=state.cols,
                exit_x=state.exit_x,
                exit_y=state.exit_y,
                player=ActorFrame.of(state.player),
                pursuers=[ActorFrame.of(p) for p in state.pursuers],
                pending_targets=list(state.pending_targets),
                dead=state.dead,
                won=state.won,
                ticks=state.ticks,
                grid=[[int(block) for block in row] for row in state.grid] if include_grid else None,
            )

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def run_loop(self, max_ticks: Optional[int] = None) -> int:
        """Tick until stop() is called (or max_ticks ticks ran). Returns ticks run."""
        logger.info("Engine loop started (speed=%s)", self.config.speed)
        ticks = 0
        while not self._stop_requested.is_set():
            self.tick_once()
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            self._stop_requested.wait(self.config.speed.tick_interval_seconds)
        logger.info("Engine loop stopped after %d ticks", ticks)
        return ticks

    def run_in_thread(self, max_ticks: Optional[int] = None) -> threading.Thread:
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("engine loop is already running")
        self._stop_requested.clear()
        self._thread = threading.Thread(target=self.run_loop, args=(max_ticks,), name="maze-engine", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop_requested.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)

    def tick_once(self) -> None:
        """One complete tick: drain commands, step actors, then request a redraw."""
        with self.shared.write_lock() as state:
            self._process_commands(state)

            if not state.won:
                self.player_control.step(state)
                if state.won:
                    logger.info("Exit reached (generation=%d, ticks=%d)", state.generation, state.ticks + 1)
                # 이번 틱에 탈출했어도 추적자는 움직이지만 잡지는 못한다
                self._step_pursuers(state)

            state.ticks += 1

        self._request_redraw()

    # ------------------------------------------------------------------
    # Internals (engine thread, write lock held)
    # ------------------------------------------------------------------
    def _process_commands(self, state: GameState) -> None:
        for command in self.commands.drain():
            if isinstance(command, NewGame):
                self._init_new_game(state, command.config)
            elif isinstance(command, Click):
                self.player_control.handle_click(state, command)
            elif isinstance(command, KeyDirection):
                self.player_control.handle_key(state, command)
            else:
                logger.warning("Unhandled command type: %s", type(command).__name__)

    def _init_new_game(self, state: GameState, config: GameConfig) -> None:
        self.config = config
        rows, cols = config.lab_size.rows, config.lab_size.cols

        state.generation += 1
        state.config = config
        state.rows, state.cols = rows, cols
        state.grid = generate_maze(rows, cols, self.rng)
        state.exit_x, state.exit_y = cell_center(cols - 2, rows - 2)

        # 플레이어는 좌상단 칸에서 시작
        state.player = MovingObject.at_cell(1, 1, Direction.RIGHT)
        state.pursuers = self.pursuer_behavior.spawn_pursuers(state, config.difficulty.pursuer_count(rows, cols))

        state.dead = False
        state.won = False
        state.pending_targets = []
        state.ticks = 0
        logger.info(
            "New game #%d: %s, %s, %s, %d pursuers",
            state.generation,
            config.difficulty,
            config.lab_size,
            config.speed,
            len(state.pursuers),
        )

    def _step_pursuers(self, state: GameState) -> None:
        player = state.player
        reach = BLOCK_SIZE * CAPTURE_DISTANCE_FACTOR
        for pursuer in state.pursuers:
            self.pursuer_behavior.step(pursuer, state)
            if state.dead or state.won:
                continue
            if abs(player.x - pursuer.x) < reach and abs(player.y - pursuer.y) < reach:
                state.dead = True
                logger.info("Player caught (generation=%d, ticks=%d)", state.generation, state.ticks + 1)

    def _request_redraw(self) -> None:
        if self.invalidate is None:
            return
        try:
            self.invalidate()
        except Exception:
            logger.exception("Invalidate callback failed")

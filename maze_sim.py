#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Headless maze chase runner.

엔진을 별도 스레드에서 돌리고, 상태를 텍스트로 출력한다.
- --autopilot: 최단 경로를 따라 클릭 명령을 보내는 생산자 스레드
- --print-maze: 시작 시 미로 출력
- --dump-every N: N틱마다 상태 한 줄 출력
- --init-catalogs: 카탈로그 JSON이 없으면 내장 값으로 생성
"""

from __future__ import annotations

import argparse
import logging
import threading
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from catalog_data import ensure_catalog_file, load_catalogs
from config import CATALOG_FILE, PATH_QUEUE_CAPACITY
from engine import Engine, FrameSnapshot
from maze_generation import maze_to_text
from maze_pathing import find_path, turning_points
from model import Block, Point, cell_center, cell_of

logger = logging.getLogger(__name__)


class RuntimeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    difficulty: Optional[str] = None
    lab_size: Optional[str] = None
    speed: Optional[str] = None
    seed: Optional[int] = None
    max_ticks: Optional[int] = 2000
    autopilot: bool = False
    print_maze: bool = False
    dump_every: int = 0
    catalogs: str = str(CATALOG_FILE)
    init_catalogs: bool = False
    log_level: str = "INFO"


def autopilot_waypoints(frame: FrameSnapshot, limit: int = PATH_QUEUE_CAPACITY) -> List[Point]:
    """Pixel waypoints (cell centres) along the shortest path from the player to the exit."""
    if frame.grid is None:
        raise ValueError("autopilot needs a frame taken with include_grid=True")
    grid = [[Block(v) for v in row] for row in frame.grid]
    start = cell_of(frame.player.target_x, frame.player.target_y)
    goal = cell_of(frame.exit_x, frame.exit_y)
    path = find_path(start, goal, grid)
    return [cell_center(col, row) for col, row in turning_points(start, path)][:limit]


def _player_idle(frame: FrameSnapshot) -> bool:
    p = frame.player
    return not frame.pending_targets and int(p.x) == p.target_x and int(p.y) == p.target_y


def run_autopilot(engine: Engine, stop: threading.Event, poll_seconds: float = 0.01) -> None:
    """Producer thread: whenever the player idles, queue clicks towards the exit."""
    submitted_at = -1
    generation = -1
    while not stop.is_set():
        frame = engine.frame(include_grid=True)
        if frame.won or frame.dead:
            return
        if frame.generation != generation:
            generation, submitted_at = frame.generation, -1
        if frame.ticks > submitted_at and _player_idle(frame):
            for x, y in autopilot_waypoints(frame):
                engine.submit_click(x, y)
            submitted_at = frame.ticks
        stop.wait(poll_seconds)


def render_text(frame: FrameSnapshot) -> str:
    if frame.grid is None:
        return ""
    canvas = [list(line) for line in maze_to_text([[Block(v) for v in row] for row in frame.grid]).splitlines()]
    ec, er = cell_of(frame.exit_x, frame.exit_y)
    canvas[er][ec] = "E"
    for p in frame.pursuers:
        c, r = cell_of(p.x, p.y)
        canvas[r][c] = "X"
    pc, pr = cell_of(frame.player.x, frame.player.y)
    canvas[pr][pc] = "@"
    return "\n".join("".join(row) for row in canvas)


def format_frame_line(frame: FrameSnapshot) -> str:
    p = frame.player
    status = "WON" if frame.won else "DEAD" if frame.dead else "running"
    return (
        f"[tick {frame.ticks:>5}] player=({p.x:.1f},{p.y:.1f})->({p.target_x},{p.target_y}) "
        f"facing={p.direction.value} queued={len(frame.pending_targets)} "
        f"pursuers={len(frame.pursuers)} status={status}"
    )


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless maze chase runner")
    parser.add_argument("--difficulty", default=None, help="Difficulty name (default: catalog default)")
    parser.add_argument("--size", dest="lab_size", default=None, help="Lab size name (default: catalog default)")
    parser.add_argument("--speed", default=None, help="Speed name (default: catalog default)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for labyrinth and pursuers")
    parser.add_argument("--max-ticks", type=int, default=2000, help="Stop after this many ticks (0 = never)")
    parser.add_argument("--autopilot", action="store_true", help="Walk the player to the exit automatically")
    parser.add_argument("--print-maze", action="store_true", help="Print the labyrinth before starting")
    parser.add_argument("--dump-every", type=int, default=0, help="Print a state line every N ticks")
    default_catalogs = CATALOG_FILE
    parser.add_argument("--catalogs", default=str(default_catalogs), help=f"Catalog JSON file (default: {default_catalogs})")
    parser.add_argument("--init-catalogs", action="store_true", help="Write the built-in catalogs to --catalogs if the file is missing")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def build_engine(config: RuntimeConfig, invalidate=None) -> Engine:
    path = Path(config.catalogs)
    if config.init_catalogs and not path.exists():
        ensure_catalog_file(path)
        logger.info("Wrote built-in catalogs to %s", path)
    catalogs = load_catalogs(path)
    defaults = catalogs.default_config()
    game_config = catalogs.config_for(
        config.difficulty or defaults.difficulty.name,
        config.lab_size or defaults.lab_size.name,
        config.speed or defaults.speed.name,
    )
    return Engine(invalidate, seed=config.seed, catalogs=catalogs, config=game_config)


def run(config: RuntimeConfig) -> FrameSnapshot:
    holder: dict = {}

    def on_invalidate() -> None:
        engine = holder["engine"]
        frame = engine.frame()
        if config.dump_every > 0 and frame.ticks % config.dump_every == 0:
            print(format_frame_line(frame))
        if frame.won or frame.dead:
            engine.stop(timeout=None)

    engine = build_engine(config, on_invalidate)
    holder["engine"] = engine

    if config.print_maze:
        print(render_text(engine.frame(include_grid=True)))

    max_ticks = config.max_ticks if config.max_ticks else None
    loop_thread = engine.run_in_thread(max_ticks)

    stop_autopilot = threading.Event()
    pilot: Optional[threading.Thread] = None
    if config.autopilot:
        pilot = threading.Thread(target=run_autopilot, args=(engine, stop_autopilot), name="autopilot", daemon=True)
        pilot.start()

    loop_thread.join()
    stop_autopilot.set()
    if pilot is not None:
        pilot.join(timeout=5.0)

    final = engine.frame(include_grid=config.print_maze)
    print(format_frame_line(final))
    if config.print_maze:
        print(render_text(final))
    return final


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config = RuntimeConfig(
        difficulty=args.difficulty,
        lab_size=args.lab_size,
        speed=args.speed,
        seed=args.seed,
        max_ticks=args.max_ticks,
        autopilot=args.autopilot,
        print_maze=args.print_maze,
        dump_every=args.dump_every,
        catalogs=args.catalogs,
        init_catalogs=args.init_catalogs,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(config)


if __name__ == "__main__":
    main()

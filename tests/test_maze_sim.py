from __future__ import annotations

import orjson

from catalogs import DIFFICULTIES, LAB_SIZES, GameConfig, Speed
from config import CATALOG_FILE, COMMAND_QUEUE_CAPACITY
from engine import Engine
from maze_sim import RuntimeConfig, _parse_args, autopilot_waypoints, build_engine, format_frame_line, render_text, run

FAST_XS = GameConfig(
    difficulty=DIFFICULTIES.by_name("Baby"),
    lab_size=LAB_SIZES.by_name("XS"),
    speed=Speed(name="Test", tick_interval_ms=1, default=True),
)


def test_parse_args_defaults():
    args = _parse_args([])

    assert args.difficulty is None and args.lab_size is None and args.speed is None
    assert args.max_ticks == 2000
    assert args.autopilot is False
    assert args.catalogs == str(CATALOG_FILE)


def test_parse_args_flags():
    args = _parse_args(["--difficulty", "Hard", "--size", "XS", "--seed", "9", "--autopilot", "--dump-every", "10"])

    assert (args.difficulty, args.lab_size, args.seed) == ("Hard", "XS", 9)
    assert args.autopilot is True
    assert args.dump_every == 10


def test_autopilot_waypoints_lead_to_exit():
    for seed in range(5):
        eng = Engine(seed=seed, config=FAST_XS)

        for _ in range(2000):
            frame = eng.frame(include_grid=True)
            if frame.won:
                break
            if not frame.pending_targets and frame.player.x == frame.player.target_x and frame.player.y == frame.player.target_y:
                for x, y in autopilot_waypoints(frame, limit=COMMAND_QUEUE_CAPACITY):
                    eng.submit_click(x, y)
            eng.tick_once()

        assert eng.frame().won is True


def test_render_text_marks_player_and_exit():
    eng = Engine(seed=5, config=FAST_XS)

    text = render_text(eng.frame(include_grid=True)).splitlines()

    assert len(text) == 9
    assert text[1][1] == "@"
    assert text[7][7] == "E"
    assert text[0] == "#" * 9
    assert render_text(eng.frame()) == ""


def test_format_frame_line():
    line = format_frame_line(Engine(seed=5, config=FAST_XS).frame())

    assert "player=(60.0,60.0)" in line
    assert "status=running" in line


def test_run_with_autopilot_wins(tmp_path, capsys):
    catalog_path = tmp_path / "catalogs.json"
    catalog_path.write_bytes(
        orjson.dumps({"speeds": [{"name": "Blink", "tick_interval_ms": 1, "default": True}]})
    )
    config = RuntimeConfig(
        difficulty="Baby",
        lab_size="XS",
        seed=3,
        max_ticks=5000,
        autopilot=True,
        catalogs=str(catalog_path),
    )

    final = run(config)

    assert final.won is True
    assert final.ticks < 5000
    assert "status=WON" in capsys.readouterr().out


def test_init_catalogs_writes_missing_file(tmp_path):
    path = tmp_path / "data" / "catalogs.json"

    assert _parse_args(["--init-catalogs"]).init_catalogs is True
    eng = build_engine(RuntimeConfig(lab_size="XS", catalogs=str(path), init_catalogs=True))

    assert path.exists()
    assert [row["name"] for row in orjson.loads(path.read_bytes())["lab_sizes"]] == ["XS", "S", "M", "L", "XL"]
    assert eng.frame().rows == 9


def test_catalog_file_is_left_alone_without_init_flag(tmp_path):
    path = tmp_path / "catalogs.json"

    build_engine(RuntimeConfig(lab_size="XS", catalogs=str(path)))

    assert not path.exists()

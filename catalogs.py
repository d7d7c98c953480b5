#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Game option catalogs (difficulty, labyrinth size, speed).

Each catalog is an ordered, read-only list with exactly one default entry.
Bad catalog data fails here, at construction time, never inside the loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import MIN_LAB_DIM


class Difficulty(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    # 1,000칸당 추적자 수. 예) 10.0, 21*21=441칸 -> 4.41 -> 4마리
    pursuer_density: float = Field(ge=0)
    default: bool = False

    def pursuer_count(self, rows: int, cols: int) -> int:
        return int(rows * cols * self.pursuer_density / 1000)

    def __str__(self) -> str:
        return self.name


class LabSize(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    rows: int
    cols: int
    default: bool = False

    @field_validator("rows", "cols")
    @classmethod
    def _odd_and_large_enough(cls, value: int) -> int:
        if value < MIN_LAB_DIM:
            raise ValueError(f"labyrinth dimension must be >= {MIN_LAB_DIM}, got {value}")
        if value % 2 == 0:
            raise ValueError(f"labyrinth dimension must be odd, got {value}")
        return value

    def __str__(self) -> str:
        return f"{self.name} ({self.rows}x{self.cols})"


class Speed(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    tick_interval_ms: int = Field(gt=0)
    default: bool = False

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0

    @property
    def fps(self) -> int:
        # round half up
        return (1000 + self.tick_interval_ms // 2) // self.tick_interval_ms

    def __str__(self) -> str:
        return f"{self.name} ({self.fps} FPS)"


class GameConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    difficulty: Difficulty
    lab_size: LabSize
    speed: Speed


EntryT = TypeVar("EntryT", Difficulty, LabSize, Speed)


class Catalog(Generic[EntryT]):
    """Ordered option list with a single default entry."""

    def __init__(self, title: str, entries: Sequence[EntryT]):
        self.title = title
        self.entries: Tuple[EntryT, ...] = tuple(entries)
        if not self.entries:
            raise ValueError(f"{title} catalog is empty")
        defaults = [i for i, entry in enumerate(self.entries) if entry.default]
        if len(defaults) != 1:
            raise ValueError(f"{title} catalog must mark exactly one default entry, got {len(defaults)}")
        names = [entry.name for entry in self.entries]
        if len(set(names)) != len(names):
            raise ValueError(f"{title} catalog has duplicate names: {names}")
        self.default_index = defaults[0]

    @property
    def default(self) -> EntryT:
        return self.entries[self.default_index]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[EntryT]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> EntryT:
        return self.entries[index]

    def by_name(self, name: str) -> EntryT:
        wanted = str(name).strip().lower()
        for entry in self.entries:
            if entry.name.lower() == wanted:
                return entry
        raise KeyError(f"unknown {self.title.lower()}: {name!r} (choices: {', '.join(e.name for e in self.entries)})")


@dataclass(frozen=True)
class Catalogs:
    difficulties: Catalog[Difficulty]
    lab_sizes: Catalog[LabSize]
    speeds: Catalog[Speed]

    def default_config(self) -> GameConfig:
        return GameConfig(
            difficulty=self.difficulties.default,
            lab_size=self.lab_sizes.default,
            speed=self.speeds.default,
        )

    def config_for(self, difficulty: str, lab_size: str, speed: str) -> GameConfig:
        return GameConfig(
            difficulty=self.difficulties.by_name(difficulty),
            lab_size=self.lab_sizes.by_name(lab_size),
            speed=self.speeds.by_name(speed),
        )


DIFFICULTIES: Catalog[Difficulty] = Catalog(
    "Difficulty",
    [
        Difficulty(name="Baby", pursuer_density=0),
        Difficulty(name="Easy", pursuer_density=5),
        Difficulty(name="Normal", pursuer_density=10, default=True),
        Difficulty(name="Hard", pursuer_density=20),
        Difficulty(name="Brutal", pursuer_density=40),
    ],
)

LAB_SIZES: Catalog[LabSize] = Catalog(
    "Lab size",
    [
        LabSize(name="XS", rows=9, cols=9),
        LabSize(name="S", rows=15, cols=15),
        LabSize(name="M", rows=33, cols=33, default=True),
        LabSize(name="L", rows=51, cols=51),
        LabSize(name="XL", rows=99, cols=99),
    ],
)

SPEEDS: Catalog[Speed] = Catalog(
    "Speed",
    [
        Speed(name="Slow", tick_interval_ms=67),                   # ~15 FPS
        Speed(name="Normal", tick_interval_ms=50, default=True),   # ~20 FPS
        Speed(name="Fast", tick_interval_ms=37),                   # ~27 FPS
    ],
)

DEFAULT_CATALOGS = Catalogs(difficulties=DIFFICULTIES, lab_sizes=LAB_SIZES, speeds=SPEEDS)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Editable catalog file (JSON).

- JSON I/O: orjson
- schema validation: pydantic

파일이 없으면 내장 카탈로그를 쓰고, 잘못된 데이터는 그대로 예외로 올린다.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import orjson
from pydantic import BaseModel, ConfigDict, Field

from catalogs import DEFAULT_CATALOGS, Catalog, Catalogs, Difficulty, LabSize, Speed
from config import CATALOG_FILE


class CatalogFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    difficulties: List[Difficulty] = Field(default_factory=list)
    lab_sizes: List[LabSize] = Field(default_factory=list)
    speeds: List[Speed] = Field(default_factory=list)


def _write_json(path: Path, obj: object) -> None:
    path.write_bytes(orjson.dumps(obj, option=orjson.OPT_INDENT_2))


def catalogs_to_rows(catalogs: Catalogs) -> dict:
    return {
        "difficulties": [entry.model_dump() for entry in catalogs.difficulties],
        "lab_sizes": [entry.model_dump() for entry in catalogs.lab_sizes],
        "speeds": [entry.model_dump() for entry in catalogs.speeds],
    }


def catalogs_from_file(data: CatalogFile) -> Catalogs:
    """Build catalogs; a section left empty keeps the built-in entries."""
    return Catalogs(
        difficulties=Catalog("Difficulty", data.difficulties) if data.difficulties else DEFAULT_CATALOGS.difficulties,
        lab_sizes=Catalog("Lab size", data.lab_sizes) if data.lab_sizes else DEFAULT_CATALOGS.lab_sizes,
        speeds=Catalog("Speed", data.speeds) if data.speeds else DEFAULT_CATALOGS.speeds,
    )


def load_catalogs(path: str | Path = CATALOG_FILE) -> Catalogs:
    path = Path(path)
    if not path.exists():
        return DEFAULT_CATALOGS
    payload = orjson.loads(path.read_bytes())
    return catalogs_from_file(CatalogFile.model_validate(payload))


def save_catalogs(catalogs: Catalogs, path: str | Path = CATALOG_FILE) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _write_json(path, catalogs_to_rows(catalogs))


def ensure_catalog_file(path: str | Path = CATALOG_FILE) -> Path:
    """Seed the catalog file with the built-in entries if it does not exist yet."""
    path = Path(path)
    if not path.exists():
        save_catalogs(DEFAULT_CATALOGS, path)
    return path

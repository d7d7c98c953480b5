#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Engine configuration.

규칙: 이 파일에는 '상수/설정'만 둡니다. (로직 금지)
"""

from pathlib import Path

# --- Maze ---
BLOCK_SIZE = 40              # 한 칸의 픽셀 크기
MIN_LAB_DIM = 5              # rows/cols 최소값(홀수)

# --- Simulation ---
SIM_DT_SECONDS = 0.05        # 틱당 시뮬레이션 시간(고정). 게임 속도는 틱 간격으로만 조절
MOVE_SPEED = 2.0 * BLOCK_SIZE  # px/s (플레이어, 추적자 공통)
CAPTURE_DISTANCE_FACTOR = 0.75
PURSUER_SPAWN_CLEARANCE = 4  # 플레이어 주변 칸 수(추적자 생성 금지 구역)

# --- Queues ---
COMMAND_QUEUE_CAPACITY = 10
PATH_QUEUE_CAPACITY = 20

# --- Data ---
DATA_DIR = Path(__file__).parent / "data"
CATALOG_FILE = DATA_DIR / "catalogs.json"

# -*- coding: utf-8 -*-
"""
engine/shots.py

这个文件做什么：
- Setup -> Shot：对 setup 的成员 boards 做一次 fold。
- 第一个 board 创建 Shot，它的 beat 不带机位变化。
- 后续每个 board：取它自己的 active camera，和 setup 的基准机位逐轴求差（基准 - 当前）。
  基准机位在整个 fold 过程中固定，不是“上一个 board”。

去噪规则：
- 差值恰好为 0，或四舍五入到 4 位小数后为 0 的轴直接丢掉。
- 剩下至少一个轴才生成 CameraDelta；否则 beat.camera 为 None（不是空对象）。
- board 没有 sg、active camera id 找不到：视为“没有机位数据”，不报错，不生成 delta。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import List, Optional

from board2shotlist.core.schemas import Beat, Board, Camera, CameraDelta, Setup, Shot

log = logging.getLogger(__name__)

AXES = ("roll", "rotation", "tilt", "x", "y", "z")

# 四位小数以下视为浮点噪声
DELTA_DIGITS = 4


@dataclass
class _FoldState:
	base: Camera
	number: int
	shot: Optional[Shot] = None


def camera_delta(base: Camera, current: Camera) -> Optional[CameraDelta]:
	changed = {}
	for axis in AXES:
		d = getattr(base, axis) - getattr(current, axis)
		if d == 0 or round(d, DELTA_DIGITS) == 0:
			continue
		changed[axis] = d

	if not changed:
		return None
	return CameraDelta(**changed)


def _beat(board: Board, camera: Optional[CameraDelta] = None) -> Beat:
	return Beat(
		uid=board.uid,
		dialogue=board.dialogue,
		action=board.action,
		notes=board.notes,
		camera=camera,
	)


def _step(state: _FoldState, board: Board) -> _FoldState:
	if state.shot is None:
		state.shot = Shot(
			number=state.number,
			camera=state.base,
			uid=board.uid,
			duration=board.duration,
			beats=[_beat(board)],
		)
		return state

	current = board.active_camera
	if current is None:
		log.debug("board %s: active camera unavailable; no delta", board.uid)
		state.shot.beats.append(_beat(board))
		return state

	state.shot.beats.append(_beat(board, camera_delta(state.base, current)))
	return state


def assemble_shot(setup: Setup) -> Shot:
	state = reduce(_step, setup.boards, _FoldState(base=setup.camera, number=setup.number))
	if state.shot is None:
		# Setup 创建时至少带一个 board，走不到这里
		raise ValueError(f"setup {setup.number} has no boards")
	return state.shot


def get_shots(setups: List[Setup]) -> List[Shot]:
	return [assemble_shot(s) for s in setups]

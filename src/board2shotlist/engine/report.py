# -*- coding: utf-8 -*-
"""
engine/report.py

Setup/Shot -> 展示记录。

同一个场景输出两个视图：
- setups：每个机位一条，shots 只保留成员 board 的 uid 列表
- shots ：完整的 Shot/Beat 结构
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from board2shotlist.core.geometry import focal_length_from_fov
from board2shotlist.core.schemas import Board, Setup, Shot
from board2shotlist.core.units import format_meters, format_mm
from board2shotlist.engine.setups import Tolerances, get_camera_setups
from board2shotlist.engine.shots import get_shots


def format_setup(setup: Setup) -> Dict[str, Any]:
	return {
		"number": setup.number,
		"fov": format_mm(focal_length_from_fov(setup.fov, setup.camera.aspect_ratio)),
		"height": format_meters(setup.height),
		"shots": [b.uid for b in setup.boards],
	}


def get_shot_list_for_scene(
	boards: Iterable[Board],
	tolerances: Optional[Tolerances] = None,
) -> Dict[str, List[Any]]:
	"""
	返回 {"setups": [dict...], "shots": [Shot...]}。
	shots 保留 Shot 对象，序列化交给 SceneReport.to_dict()。
	"""
	setups = get_camera_setups(boards, tolerances)
	shots: List[Shot] = get_shots(setups)

	return {
		"setups": [format_setup(s) for s in setups],
		"shots": shots,
	}

# -*- coding: utf-8 -*-
"""
engine/setups.py

这个文件做什么：
- 把一个场景的 boards 按“是不是同一个机位”聚类成 Setup 列表。

算法（贪心、单遍、顺序敏感）：
1) 按顺序遍历 boards，没有 sg 的直接跳过（不会出现在任何 Setup 里）
2) 每个 board 的每个相机候选，按创建顺序扫已有 Setup
3) 六个轴全部在容差内才算匹配：roll/rotation/tilt 用角度容差，x/y/z 用位置容差
4) 第一个匹配的 Setup 胜出（first-fit，不找“最像”的）
5) 都不匹配就新建 Setup，编号 +1

注意：
- 不回溯、不重新聚类：board 一旦分配就不再变。
- 输出顺序会直接影响报告，改成 best-fit 之前要先确认。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from board2shotlist.core.geometry import approx_equal, deg_to_rad
from board2shotlist.core.schemas import Board, Camera, Setup

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tolerances:
	rotation: float = deg_to_rad(60)  # 弧度
	position: float = 6.0  # 米


def is_same_camera(a: Camera, b: Camera, tolerances: Tolerances) -> bool:
	return (
		approx_equal(a.roll, b.roll, tolerances.rotation)
		and approx_equal(a.rotation, b.rotation, tolerances.rotation)
		and approx_equal(a.tilt, b.tilt, tolerances.rotation)
		and approx_equal(a.x, b.x, tolerances.position)
		and approx_equal(a.y, b.y, tolerances.position)
		and approx_equal(a.z, b.z, tolerances.position)
	)


def find_setup(setups: List[Setup], camera: Camera, tolerances: Tolerances) -> Optional[Setup]:
	for setup in setups:
		if is_same_camera(setup.camera, camera, tolerances):
			return setup
	return None


def get_camera_setups(boards: Iterable[Board], tolerances: Optional[Tolerances] = None) -> List[Setup]:
	tolerances = tolerances or Tolerances()

	setups: List[Setup] = []
	count = 0

	for board in boards:
		if board.sg is None:
			log.debug("board %s has no scene graph; skipped", board.uid)
			continue

		for camera in board.sg.cameras():
			setup = find_setup(setups, camera, tolerances)

			if setup is not None:
				# 同一个 board 的两个相机落进同一个 Setup 时只记一次
				if setup.boards[-1] is not board:
					setup.boards.append(board)
				continue

			count += 1
			setups.append(Setup(number=count, camera=camera, boards=[board]))

	return setups

# -*- coding: utf-8 -*-
"""
board2shotlist/core/config.py

这个文件做什么：
- 集中管理 shot list 的可调参数（聚类容差、storyboard 文件扩展名）。
- 支持从项目目录的 .env 读取配置，不需要在 shell 里 export。

配置来源优先级（从高到低）：
1) 显式传参（CLI 参数）
2) 系统环境变量
3) project_root/.env（只补充环境里没有的变量，不覆盖）
4) 默认值

可用变量：
- SHOTLIST_ROTATION_TOLERANCE_DEG ：角度容差（度），默认 60
- SHOTLIST_POSITION_TOLERANCE_M   ：位置容差（米），默认 6
- SHOTLIST_STORYBOARD_EXT         ：storyboard 文件扩展名，默认 .storyboarder
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from board2shotlist.core.geometry import deg_to_rad
from board2shotlist.engine.setups import Tolerances

DEFAULT_ROTATION_TOLERANCE_DEG = 60.0
DEFAULT_POSITION_TOLERANCE_M = 6.0
DEFAULT_STORYBOARD_EXT = ".storyboarder"


@dataclass
class ShotListConfig:
	rotation_tolerance_deg: float = DEFAULT_ROTATION_TOLERANCE_DEG
	position_tolerance_m: float = DEFAULT_POSITION_TOLERANCE_M
	storyboard_ext: str = DEFAULT_STORYBOARD_EXT

	@property
	def tolerances(self) -> Tolerances:
		return Tolerances(
			rotation=deg_to_rad(self.rotation_tolerance_deg),
			position=self.position_tolerance_m,
		)


def _load_dotenv_if_present(project_root: Path) -> None:
	env_path = project_root / ".env"
	if env_path.exists():
		load_dotenv(dotenv_path=str(env_path), override=False)


def _env_float(name: str, default: float) -> float:
	raw = os.environ.get(name, "").strip()
	if not raw:
		return default

	try:
		value = float(raw)
	except ValueError:
		raise ValueError(f"{name} must be a number, got {raw!r}")

	if value < 0:
		raise ValueError(f"{name} must be >= 0, got {value}")
	return value


def load_config(
	project_root: Optional[str] = None,
	rotation_tolerance_deg: Optional[float] = None,
	position_tolerance_m: Optional[float] = None,
	storyboard_ext: Optional[str] = None,
) -> ShotListConfig:
	root = Path(project_root or os.getcwd()).resolve()
	_load_dotenv_if_present(root)

	rot = rotation_tolerance_deg
	if rot is None:
		rot = _env_float("SHOTLIST_ROTATION_TOLERANCE_DEG", DEFAULT_ROTATION_TOLERANCE_DEG)

	pos = position_tolerance_m
	if pos is None:
		pos = _env_float("SHOTLIST_POSITION_TOLERANCE_M", DEFAULT_POSITION_TOLERANCE_M)

	if rot < 0 or pos < 0:
		raise ValueError(f"tolerances must be >= 0 (rotation={rot}, position={pos})")

	ext = (storyboard_ext or os.environ.get("SHOTLIST_STORYBOARD_EXT", "")).strip() or DEFAULT_STORYBOARD_EXT
	if not ext.startswith("."):
		ext = "." + ext

	return ShotListConfig(rotation_tolerance_deg=rot, position_tolerance_m=pos, storyboard_ext=ext)

# -*- coding: utf-8 -*-
"""
board2shotlist/core/units.py

展示层的单位格式化：数值 -> 带单位的字符串。
- 只在 assemble/report 时调用，内部数据始终保持原始数值（米、弧度、度）。
"""

from __future__ import annotations

from board2shotlist.core.geometry import rad_to_deg


def _fixed(value: float, digits: int) -> str:
	# round 之后的 -0.0 按 0 输出，避免出现 "-0.000m"
	value = round(value, digits)
	if value == 0:
		value = 0.0
	return f"{value:.{digits}f}"


def format_mm(value: float) -> str:
	return _fixed(value, 3) + "mm"


def format_meters(value: float) -> str:
	return _fixed(value, 3) + "m"


def format_degrees(radians: float) -> str:
	"""弧度 -> 度，两位小数。"""
	return _fixed(rad_to_deg(radians), 2) + "°"

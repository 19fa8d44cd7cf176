# -*- coding: utf-8 -*-
"""
board2shotlist/core/geometry.py

纯数值工具，无状态：
- 角度/弧度换算
- 带容差的近似相等（聚类机位用）
- 垂直 FOV -> 等效焦距（35mm 胶片规格，针孔相机模型）
"""

from __future__ import annotations

import math

# 胶片规格（mm），对应常见 3D 引擎透视相机的默认 filmGauge
FILM_GAUGE_MM = 35.0


def deg_to_rad(deg: float) -> float:
	return deg * math.pi / 180


def rad_to_deg(rad: float) -> float:
	return rad * 180 / math.pi


def approx_equal(a: float, b: float, tolerance: float) -> bool:
	"""
	|a - b| < tolerance，严格小于：差值恰好等于容差时视为“不相等”。
	"""
	if tolerance < 0:
		raise ValueError(f"tolerance must be >= 0, got {tolerance}")

	return abs(a - b) < tolerance


def focal_length_from_fov(fov: float, aspect_ratio: float) -> float:
	"""
	垂直视场角（度）+ 宽高比 -> 等效焦距（mm）。

	胶片规格套在画面较宽的一边：
	- aspect >= 1（横幅）：胶片高度 = gauge / aspect
	- aspect < 1（竖幅）：胶片高度 = gauge
	"""
	if not 0 < fov < 180:
		raise ValueError(f"fov must be in (0, 180) degrees, got {fov}")
	if aspect_ratio <= 0:
		raise ValueError(f"aspect_ratio must be > 0, got {aspect_ratio}")

	film_height = FILM_GAUGE_MM / max(aspect_ratio, 1)
	v_extent_slope = math.tan(deg_to_rad(0.5 * fov))
	return 0.5 * film_height / v_extent_slope

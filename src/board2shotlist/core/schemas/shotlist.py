# -*- coding: utf-8 -*-
"""
board2shotlist/core/schemas/shotlist.py

输出侧的数据结构：
- Setup       ：一组共享同一物理机位的 boards（聚类结果）
- CameraDelta ：beat 相对 setup 基准机位的变化量（按轴可选）
- Beat        ：一个 board 在 shot 里的贡献（台词/动作/备注 + 可选机位变化）
- Shot        ：与 Setup 一一对应
- SceneReport / ProjectReport：最终报告

约定：
- 内部一律保存原始数值（米/弧度/度），带单位的字符串只在 to_dict() 时生成。
- to_dict() 的字段名就是报告契约，不要随意改名。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from board2shotlist.core.geometry import focal_length_from_fov
from board2shotlist.core.schemas.board import Board, Camera
from board2shotlist.core.units import format_degrees, format_meters, format_mm


@dataclass
class Setup:
	"""
	number：场景内从 1 开始，按首次出现顺序分配。
	camera：簇里遇到的第一个相机（不是平均值）。
	boards：成员 board，只追加，不重排。
	"""
	number: int
	camera: Camera
	boards: List[Board] = field(default_factory=list)

	@property
	def fov(self) -> float:
		return self.camera.fov

	@property
	def height(self) -> float:
		return self.camera.z


@dataclass
class CameraDelta:
	"""None 表示该轴没有变化（省略），不要用 0 表示。"""
	roll: Optional[float] = None
	rotation: Optional[float] = None
	tilt: Optional[float] = None
	x: Optional[float] = None
	y: Optional[float] = None
	z: Optional[float] = None

	def is_empty(self) -> bool:
		return all(
			v is None
			for v in (self.roll, self.rotation, self.tilt, self.x, self.y, self.z)
		)

	def to_dict(self) -> Dict[str, str]:
		out: Dict[str, str] = {}
		if self.x is not None:
			out["x"] = format_meters(self.x)
		if self.y is not None:
			out["y"] = format_meters(self.y)
		if self.z is not None:
			out["height"] = format_meters(self.z)
		if self.rotation is not None:
			out["rotation"] = format_degrees(self.rotation)
		if self.tilt is not None:
			out["tilt"] = format_degrees(self.tilt)
		if self.roll is not None:
			out["roll"] = format_degrees(self.roll)
		return out


@dataclass
class Beat:
	uid: str
	dialogue: str = ""
	action: str = ""
	notes: str = ""
	camera: Optional[CameraDelta] = None

	def to_dict(self) -> Dict[str, Any]:
		out: Dict[str, Any] = {
			"uid": self.uid,
			"dialogue": self.dialogue,
			"action": self.action,
			"notes": self.notes,
		}
		if self.camera is not None:
			out["camera"] = self.camera.to_dict()
		return out


def describe_camera(camera: Camera) -> Dict[str, str]:
	"""基准机位 -> 展示字段（焦距/位置/高度/角度）。"""
	return {
		"fov": format_mm(focal_length_from_fov(camera.fov, camera.aspect_ratio)),
		"x": format_meters(camera.x),
		"y": format_meters(camera.y),
		"height": format_meters(camera.z),
		"rotation": format_degrees(camera.rotation),
		"tilt": format_degrees(camera.tilt),
		"roll": format_degrees(camera.roll),
	}


@dataclass
class Shot:
	"""
	number == setup_number == 对应 Setup 的 number。
	uid/duration：取自 setup 的第一个 board。
	"""
	number: int
	camera: Camera
	uid: str = ""
	duration: Optional[float] = None
	beats: List[Beat] = field(default_factory=list)

	@property
	def setup_number(self) -> int:
		return self.number

	def to_dict(self) -> Dict[str, Any]:
		out: Dict[str, Any] = {
			"number": self.number,
			"setupNumber": self.setup_number,
			"uid": self.uid,
			"duration": self.duration,
		}
		out.update(describe_camera(self.camera))
		out["beats"] = [b.to_dict() for b in self.beats]
		return out


@dataclass
class SceneReport:
	number: str
	id: str
	slugline: str
	synopsis: str
	setups: List[Dict[str, Any]]
	shots: List[Shot]
	# 角色归属尚未实现，固定为空列表
	characters: List[str] = field(default_factory=list)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"number": self.number,
			"id": self.id,
			"slugline": self.slugline,
			"synopsis": self.synopsis,
			"characters": list(self.characters),
			"setups": self.setups,
			"shots": [s.to_dict() for s in self.shots],
		}


@dataclass
class ProjectReport:
	scenes: List[SceneReport] = field(default_factory=list)

	def to_dict(self) -> Dict[str, Any]:
		return {"scenes": [s.to_dict() for s in self.scenes]}

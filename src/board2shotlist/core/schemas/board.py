# -*- coding: utf-8 -*-
"""
board2shotlist/core/schemas/board.py

输入侧的数据结构（由 storyboard 文件加载而来，引擎只读不写）：
- Board      ：一格分镜板
- SceneGraph ：board 上附带的 3D 场景快照（sg）
- Camera     ：场景里 type == "camera" 的对象快照

注意：
- scene_objects 是普通 dict，依赖 Python dict 的插入顺序；
  聚类结果对相机候选的遍历顺序敏感，不能换成无序容器。
- from_dict 只做“取字段”，缺字段用默认值（相机的 fov 除外）；类型错误由 core/io 统一带路径报错。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Camera:
	"""
	机位快照：
	- x/y/z：场景坐标（米），z 即机位高度
	- rotation/tilt/roll：弧度
	- fov：垂直视场角（度）
	"""
	id: str
	x: float
	y: float
	z: float
	rotation: float
	tilt: float
	roll: float
	fov: float
	aspect_ratio: float = 1.0

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "Camera":
		"""
		fov 必填且必须在 (0, 180) 内，否则焦距无从换算，直接 raise ValueError。
		"""
		cid = str(data.get("id", ""))
		if data.get("fov") is None:
			raise ValueError(f"camera {cid!r}: missing fov")

		fov = float(data["fov"])
		if not 0 < fov < 180:
			raise ValueError(f"camera {cid!r}: fov must be in (0, 180), got {fov}")

		return cls(
			id=cid,
			x=float(data.get("x", 0)),
			y=float(data.get("y", 0)),
			z=float(data.get("z", 0)),
			rotation=float(data.get("rotation", 0)),
			tilt=float(data.get("tilt", 0)),
			roll=float(data.get("roll", 0)),
			fov=fov,
			aspect_ratio=float(data.get("aspectRatio", 1)),
		)


@dataclass
class SceneGraph:
	scene_objects: Dict[str, Dict[str, Any]] = field(default_factory=dict)
	active_camera: Optional[str] = None

	def cameras(self) -> List[Camera]:
		"""所有 type == "camera" 的对象，按插入顺序。"""
		return [
			Camera.from_dict(o)
			for o in self.scene_objects.values()
			if o.get("type") == "camera"
		]

	def camera_by_id(self, camera_id: Optional[str]) -> Optional[Camera]:
		if camera_id is None:
			return None

		for o in self.scene_objects.values():
			if o.get("type") == "camera" and o.get("id") == camera_id:
				return Camera.from_dict(o)
		return None

	@classmethod
	def from_dict(cls, sg: Dict[str, Any]) -> "SceneGraph":
		data = sg.get("data") or {}
		return cls(
			scene_objects=dict(data.get("sceneObjects") or {}),
			active_camera=data.get("activeCamera"),
		)


@dataclass
class Board:
	uid: str
	duration: Optional[float] = None
	dialogue: str = ""
	action: str = ""
	notes: str = ""
	sg: Optional[SceneGraph] = None

	@property
	def active_camera(self) -> Optional[Camera]:
		"""当前激活的相机；没有 sg 或 id 找不到时返回 None。"""
		if self.sg is None:
			return None
		return self.sg.camera_by_id(self.sg.active_camera)

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "Board":
		sg = data.get("sg")
		return cls(
			uid=str(data.get("uid", "")),
			duration=data.get("duration"),
			dialogue=data.get("dialogue") or "",
			action=data.get("action") or "",
			notes=data.get("notes") or "",
			sg=SceneGraph.from_dict(sg) if sg else None,
		)

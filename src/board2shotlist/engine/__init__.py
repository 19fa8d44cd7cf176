# -*- coding: utf-8 -*-
"""
engine：shot list 生成引擎（纯函数，不读写文件）。

- setups ：按机位把 boards 聚类成 Setup
- shots  ：每个 Setup 折叠成一个 Shot（含 beats 与机位增量）
- report ：格式化成可展示的记录
"""

from .setups import Tolerances, get_camera_setups
from .shots import assemble_shot, get_shots
from .report import format_setup, get_shot_list_for_scene

__all__ = [
	"Tolerances",
	"get_camera_setups",
	"assemble_shot",
	"get_shots",
	"format_setup",
	"get_shot_list_for_scene",
]

# -*- coding: utf-8 -*-
"""
board2shotlist/core/naming.py

由剧本元数据生成每个场景的 storyboard 文件夹名：
  Scene-{scene_number}-{简介或场景标题处理后}-{scene_id}

处理步骤：
1) 截取前 50 个字符
2) 删掉 shell 特殊字符和 '.'
3) " - " 折叠成一个空格
4) 空格和路径不友好字符替换成 '-'

注意：
- 同号同简介的两个场景会得到相同的文件夹名，这里不处理冲突。
"""

from __future__ import annotations

import re
from typing import Any, Dict

MAX_DESC_CHARS = 50

_STRIP_RE = re.compile(r"[|&;$%@\"<>()+,.]")
_HYPHEN_RE = re.compile(r"[|&;/:$%@\"{}?<>()+,]")


def filenameify(text: str) -> str:
	s = text[:MAX_DESC_CHARS]
	s = _STRIP_RE.sub("", s)
	s = s.replace(" - ", " ")
	s = s.replace(" ", "-")
	return _HYPHEN_RE.sub("-", s)


def scene_folder_name(node: Dict[str, Any]) -> str:
	"""
	node：剧本解析出来的 scene 节点，至少含 scene_number/scene_id/slugline，
	synopsis 可选（有就优先用）。
	"""
	desc = node.get("synopsis") or node.get("slugline") or ""
	return f"Scene-{node['scene_number']}-{filenameify(desc)}-{node['scene_id']}"


def legacy_filenameify(text: str) -> str:
	"""
	旧版工具的文件夹名：shell 特殊字符不删除，只删 '.'，其余和 filenameify 一样都换成 '-'。
	已有项目里 "(late)" 这类简介生成的是 "-late-"，读旧项目时要靠它找到文件夹。
	"""
	s = text[:MAX_DESC_CHARS]
	s = s.replace(".", "")
	s = s.replace(" - ", " ")
	s = s.replace(" ", "-")
	return _HYPHEN_RE.sub("-", s)


def legacy_scene_folder_name(node: Dict[str, Any]) -> str:
	desc = node.get("synopsis") or node.get("slugline") or ""
	return f"Scene-{node['scene_number']}-{legacy_filenameify(desc)}-{node['scene_id']}"

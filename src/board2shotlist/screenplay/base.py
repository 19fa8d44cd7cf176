# -*- coding: utf-8 -*-
"""
board2shotlist/screenplay/base.py

目的：
- 定义剧本解析器的“接口形状”。
- orchestrator 只依赖这个协议，不关心底下是哪种剧本格式。

约定：
- parse(text) -> {"tokens": [...], ...}
- parse_nodes(tokens) -> 有序节点列表，node["type"] 区分 "scene" 与其它节点
- get_scenes(tokens) -> 只含 scene 节点，每个至少有 scene_number/scene_id/slugline/synopsis
- 顺序一律等于剧本顺序
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol


class ScreenplayParser(Protocol):
	def parse(self, text: str) -> Dict[str, Any]:
		...

	def parse_nodes(self, tokens: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
		...

	def get_scenes(self, tokens: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
		...

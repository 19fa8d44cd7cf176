# -*- coding: utf-8 -*-
"""
board2shotlist/pipeline/orchestrator.py

目的：
- 项目级调度：剧本 -> 场景节点 -> 每个场景的 storyboard 文件 -> 每个场景一份 shot list。
- 这里只负责：解析剧本、拼路径、读文件、按顺序调用 engine、汇总报告。

流程：
1) 读剧本文本，交给 ScreenplayParser 得到 tokens
2) 从 tokens 里取 type == "scene" 的节点（剧本顺序）
3) 每个场景生成文件夹名（core/naming），定位 storyboards/<name>/<name><ext>
4) 读 storyboard，跑 setups -> shots -> report
5) 按剧本顺序汇总成 ProjectReport

注意：
- 任何一个文件读失败（不存在 / 格式坏了）整份报告失败，不返回半成品。
- 场景之间没有共享状态，顺序只由剧本决定。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from board2shotlist.core.config import ShotListConfig, load_config
from board2shotlist.core.io import ProjectPaths, load_storyboard, project_paths, read_script
from board2shotlist.core.naming import legacy_scene_folder_name, scene_folder_name
from board2shotlist.core.schemas import Board, ProjectReport, SceneReport
from board2shotlist.engine import Tolerances, get_shot_list_for_scene
from board2shotlist.screenplay import FountainParser, ScreenplayParser

log = logging.getLogger(__name__)


@dataclass
class SceneFolder:
	name: str
	storyboard_file: Path
	node: Dict[str, Any]
	# 命中的是旧版工具生成的文件夹名
	legacy: bool = False


def scene_folders(nodes: List[Dict[str, Any]], paths: ProjectPaths) -> List[SceneFolder]:
	folders = []
	for node in nodes:
		if node.get("type") != "scene":
			continue

		name = scene_folder_name(node)
		legacy = False

		# 新名字下没有文件时，退回旧版命名规则；两个都没有就保留新名字，读文件时报 FileNotFoundError
		if not paths.storyboard_file(name).exists():
			old = legacy_scene_folder_name(node)
			if old != name and paths.storyboard_file(old).exists():
				log.info("scene %s: using legacy folder name %s", node["scene_number"], old)
				name, legacy = old, True

		folders.append(
			SceneFolder(name=name, storyboard_file=paths.storyboard_file(name), node=node, legacy=legacy)
		)
	return folders


def build_scene_report(
	node: Dict[str, Any],
	boards: List[Board],
	tolerances: Optional[Tolerances] = None,
) -> SceneReport:
	shot_list = get_shot_list_for_scene(boards, tolerances)

	return SceneReport(
		number=node["scene_number"],
		id=node["scene_id"],
		slugline=node.get("slugline", ""),
		synopsis=node.get("synopsis", ""),
		setups=shot_list["setups"],
		shots=shot_list["shots"],
	)


def list_scene_folders(
	script_path: str | Path,
	cfg: Optional[ShotListConfig] = None,
	parser: Optional[ScreenplayParser] = None,
) -> List[SceneFolder]:
	cfg = cfg or load_config()
	parser = parser or FountainParser()

	paths = project_paths(script_path, storyboard_ext=cfg.storyboard_ext)
	parsed = parser.parse(read_script(paths.script))
	nodes = parser.parse_nodes(parsed["tokens"])

	return scene_folders(nodes, paths)


def get_shot_list_for_project(
	script_path: str | Path,
	cfg: Optional[ShotListConfig] = None,
	parser: Optional[ScreenplayParser] = None,
) -> ProjectReport:
	cfg = cfg or load_config()
	folders = list_scene_folders(script_path, cfg=cfg, parser=parser)

	report = ProjectReport()
	for folder in folders:
		log.info("scene %s -> %s", folder.node["scene_number"], folder.storyboard_file)
		boards = load_storyboard(folder.storyboard_file)
		report.scenes.append(build_scene_report(folder.node, boards, cfg.tolerances))

	log.info("shot list built: %d scene(s)", len(report.scenes))
	return report

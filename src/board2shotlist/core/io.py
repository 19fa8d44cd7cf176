# -*- coding: utf-8 -*-
"""
board2shotlist/core/io.py

目的：
- 统一管理项目目录的路径约定（剧本在哪、每个场景的 storyboard 文件在哪）。
- 读 storyboard 文件、写报告 JSON。

项目目录约定：
- <project>/<script>.fountain                              : 剧本
- <project>/storyboards/<folder>/<folder><ext>             : 每个场景一个 storyboard 文件

错误处理：
- 文件不存在：FileNotFoundError
- JSON 坏了 / 缺 boards：ValueError（带上文件路径）
- 两种都直接往上抛，整份报告失败，不输出半成品。
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from board2shotlist.core.config import DEFAULT_STORYBOARD_EXT
from board2shotlist.core.schemas import Board


@dataclass(frozen=True)
class ProjectPaths:
	"""只存路径，不做读写。"""
	root: Path
	script: Path
	storyboards_dir: Path
	storyboard_ext: str = DEFAULT_STORYBOARD_EXT

	def storyboard_file(self, folder_name: str) -> Path:
		return self.storyboards_dir / folder_name / f"{folder_name}{self.storyboard_ext}"


def project_paths(script_path: str | Path, storyboard_ext: str = DEFAULT_STORYBOARD_EXT) -> ProjectPaths:
	"""项目根目录 = 剧本所在目录。"""
	script = Path(script_path)
	root = script.parent

	return ProjectPaths(
		root=root,
		script=script,
		storyboards_dir=root / "storyboards",
		storyboard_ext=storyboard_ext,
	)


def read_script(path: Path) -> str:
	if not path.exists():
		raise FileNotFoundError(f"screenplay not found: {path}")
	return path.read_text(encoding="utf-8")


def load_storyboard_data(path: Path) -> Dict[str, Any]:
	if not path.exists():
		raise FileNotFoundError(f"storyboard file not found: {path}")

	try:
		data = json.loads(path.read_text(encoding="utf-8"))
	except json.JSONDecodeError as e:
		raise ValueError(f"invalid storyboard file {path}: {e}")

	if not isinstance(data, dict) or not isinstance(data.get("boards"), list):
		raise ValueError(f"invalid storyboard file {path}: missing 'boards' list")

	return data


def load_storyboard(path: Path) -> List[Board]:
	data = load_storyboard_data(path)

	boards = []
	for i, b in enumerate(data["boards"]):
		if not isinstance(b, dict):
			raise ValueError(f"invalid storyboard file {path}: board #{i} is not an object")

		try:
			board = Board.from_dict(b)
			# 相机在聚类时才解析，这里先解析一遍，坏数据在加载阶段就带着路径报错
			if board.sg is not None:
				board.sg.cameras()
		except (TypeError, AttributeError, ValueError) as e:
			raise ValueError(f"invalid storyboard file {path}: board #{i}: {e}")

		boards.append(board)
	return boards


def save_report(path: Path, report: Dict[str, Any]) -> None:
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")

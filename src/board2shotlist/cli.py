# -*- coding: utf-8 -*-
"""
board2shotlist/cli.py

目的：
- 提供项目的命令行入口。
- project：剧本 + storyboards 目录 -> 整个项目的 shot list。
- scene  ：单个 storyboard 文件 -> 该场景的 setups/shots。
- folders：只列出每个场景推导出来的 storyboard 文件夹名（排查路径问题用）。

注意：
- CLI 不做业务细节：只负责参数解析 + 配置加载，然后交给 orchestrator / engine。
- 没给 --out 时报告 JSON 直接打到 stdout，状态信息走 logging（-v 打开）。
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog="board2shotlist",
		description="Storyboard + screenplay -> shot list (setups / shots / beats)",
	)
	p.add_argument("-v", "--verbose", action="store_true", help="print progress logs to stderr")

	sub = p.add_subparsers(dest="cmd", required=True)

	projp = sub.add_parser("project", help="Build the shot list for every scene of a screenplay")
	projp.add_argument("--script", required=True, help="e.g. my_film/my_film.fountain")
	projp.add_argument("--out", default=None, help="write JSON here instead of stdout")
	_add_tolerance_args(projp)

	scenep = sub.add_parser("scene", help="Build the shot list for a single storyboard file")
	scenep.add_argument("--storyboard", required=True)
	scenep.add_argument("--out", default=None)
	_add_tolerance_args(scenep)

	foldp = sub.add_parser("folders", help="List the storyboard folder derived for each scene")
	foldp.add_argument("--script", required=True)

	return p


def _add_tolerance_args(p: argparse.ArgumentParser) -> None:
	p.add_argument("--rotation_tolerance_deg", type=float, default=None, help="default 60 (or .env)")
	p.add_argument("--position_tolerance_m", type=float, default=None, help="default 6 (or .env)")


def _emit(data: Dict[str, Any], out: str | None) -> None:
	if out is None:
		print(json.dumps(data, ensure_ascii=False, indent=2))
		return

	from board2shotlist.core.io import save_report

	save_report(Path(out), data)
	print(f"[OK] shot list written: {out}")


def cmd_project(script: str, out: str | None, rotation_tolerance_deg=None, position_tolerance_m=None) -> None:
	from board2shotlist.core.config import load_config
	from board2shotlist.pipeline.orchestrator import get_shot_list_for_project

	cfg = load_config(
		project_root=str(Path(script).parent),
		rotation_tolerance_deg=rotation_tolerance_deg,
		position_tolerance_m=position_tolerance_m,
	)
	report = get_shot_list_for_project(script, cfg=cfg)
	_emit(report.to_dict(), out)


def cmd_scene(storyboard: str, out: str | None, rotation_tolerance_deg=None, position_tolerance_m=None) -> None:
	from board2shotlist.core.config import load_config
	from board2shotlist.core.io import load_storyboard
	from board2shotlist.engine import get_shot_list_for_scene

	path = Path(storyboard)
	cfg = load_config(
		project_root=str(path.parent),
		rotation_tolerance_deg=rotation_tolerance_deg,
		position_tolerance_m=position_tolerance_m,
	)
	shot_list = get_shot_list_for_scene(load_storyboard(path), cfg.tolerances)
	_emit(
		{
			"setups": shot_list["setups"],
			"shots": [s.to_dict() for s in shot_list["shots"]],
		},
		out,
	)


def cmd_folders(script: str) -> None:
	from board2shotlist.core.config import load_config
	from board2shotlist.pipeline.orchestrator import list_scene_folders

	cfg = load_config(project_root=str(Path(script).parent))
	for folder in list_scene_folders(script, cfg=cfg):
		status = "OK" if folder.storyboard_file.exists() else "MISSING"
		suffix = " (legacy name)" if folder.legacy else ""
		print(f"[{status}] {folder.name}{suffix}")


def main(argv=None) -> None:
	args = build_parser().parse_args(argv)

	if args.verbose:
		logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

	if args.cmd == "project":
		cmd_project(args.script, args.out, args.rotation_tolerance_deg, args.position_tolerance_m)
		return

	if args.cmd == "scene":
		cmd_scene(args.storyboard, args.out, args.rotation_tolerance_deg, args.position_tolerance_m)
		return

	if args.cmd == "folders":
		cmd_folders(args.script)
		return

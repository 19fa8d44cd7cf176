# -*- coding: utf-8 -*-
"""Pipeline 集成测试：剧本 + storyboards 目录 -> 项目 shot list（含 CLI）。"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from board2shotlist.core.config import ShotListConfig
from board2shotlist.pipeline.orchestrator import get_shot_list_for_project, list_scene_folders


SCRIPT = """Title: Pipeline Test

INT. HOUSE - DAY #1-S1#

= Mara comes home (late)

Mara enters.

EXT. STREET - NIGHT #2-S2#

Cars pass.
"""

SCENE_1 = "Scene-1-Mara-comes-home-late-S1"
SCENE_2 = "Scene-2-EXT-STREET-NIGHT-S2"
LEGACY_SCENE_1 = "Scene-1-Mara-comes-home--late--S1"


def _cam(cid: str, x: float) -> dict:
	return {
		"id": cid, "type": "camera",
		"x": x, "y": 0, "z": 1.7,
		"rotation": 0, "tilt": 0, "roll": 0,
		"fov": 50, "aspectRatio": 1.78,
	}


def _board(uid: str, x: float | None) -> dict:
	b = {"uid": uid, "duration": 1000, "dialogue": f"line {uid}", "action": "", "notes": ""}
	if x is not None:
		b["sg"] = {"data": {"sceneObjects": {"cam": _cam("cam", x)}, "activeCamera": "cam"}}
	return b


def _write_storyboard(project: Path, folder: str, boards: list) -> None:
	d = project / "storyboards" / folder
	d.mkdir(parents=True)
	(d / f"{folder}.storyboarder").write_text(json.dumps({"boards": boards}), encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
	root = tmp_path / "film"
	root.mkdir()
	(root / "film.fountain").write_text(SCRIPT, encoding="utf-8")
	_write_storyboard(root, SCENE_1, [_board("A", 0), _board("B", None), _board("C", 10), _board("D", 0.2)])
	_write_storyboard(root, SCENE_2, [_board("E", 1), _board("F", 1), _board("G", 1)])
	return root


def test_scene_folders(project: Path):
	folders = list_scene_folders(project / "film.fountain", cfg=ShotListConfig())
	assert [f.name for f in folders] == [SCENE_1, SCENE_2]
	assert all(f.storyboard_file.exists() for f in folders)


def test_project_report(project: Path):
	report = get_shot_list_for_project(project / "film.fountain", cfg=ShotListConfig())
	data = report.to_dict()

	scenes = data["scenes"]
	assert [s["number"] for s in scenes] == ["1", "2"]
	assert [s["id"] for s in scenes] == ["S1", "S2"]
	assert scenes[0]["slugline"] == "INT. HOUSE - DAY"
	assert scenes[0]["synopsis"] == "Mara comes home (late)"
	assert scenes[0]["characters"] == []

	# 场景 1：A/D 同机位，C 远机位，B 没有 sg 被跳过
	s1 = scenes[0]
	assert [s["shots"] for s in s1["setups"]] == [["A", "D"], ["C"]]
	assert [s["number"] for s in s1["shots"]] == [1, 2]
	assert [b["uid"] for b in s1["shots"][0]["beats"]] == ["A", "D"]
	assert s1["shots"][0]["beats"][1]["camera"] == {"x": "-0.200m"}

	# 场景 2：一个机位、三个 beat、都没有机位变化
	s2 = scenes[1]
	assert len(s2["setups"]) == 1
	beats = s2["shots"][0]["beats"]
	assert [b["uid"] for b in beats] == ["E", "F", "G"]
	assert all("camera" not in b for b in beats)

	# 整个报告可以直接序列化
	json.dumps(data, ensure_ascii=False)


def test_missing_storyboard_aborts(project: Path):
	(project / "storyboards" / SCENE_2 / f"{SCENE_2}.storyboarder").unlink()
	with pytest.raises(FileNotFoundError):
		get_shot_list_for_project(project / "film.fountain", cfg=ShotListConfig())


def test_malformed_storyboard_aborts(project: Path):
	(project / "storyboards" / SCENE_1 / f"{SCENE_1}.storyboarder").write_text("{", encoding="utf-8")
	with pytest.raises(ValueError):
		get_shot_list_for_project(project / "film.fountain", cfg=ShotListConfig())


def test_missing_script(tmp_path: Path):
	with pytest.raises(FileNotFoundError):
		get_shot_list_for_project(tmp_path / "none.fountain", cfg=ShotListConfig())


def test_legacy_folder_name_fallback(project: Path):
	# 旧版工具建的文件夹：括号变成了 "-"
	(project / "storyboards" / SCENE_1).rename(project / "storyboards" / "old")
	_write_storyboard(project, LEGACY_SCENE_1, [_board("A", 0), _board("D", 0.2)])

	folders = list_scene_folders(project / "film.fountain", cfg=ShotListConfig())
	assert [f.name for f in folders] == [LEGACY_SCENE_1, SCENE_2]
	assert [f.legacy for f in folders] == [True, False]

	report = get_shot_list_for_project(project / "film.fountain", cfg=ShotListConfig())
	assert [s["shots"] for s in report.to_dict()["scenes"][0]["setups"]] == [["A", "D"]]


def test_new_folder_name_wins_over_legacy(project: Path):
	_write_storyboard(project, LEGACY_SCENE_1, [_board("Z", 0)])
	folders = list_scene_folders(project / "film.fountain", cfg=ShotListConfig())
	assert folders[0].name == SCENE_1
	assert not folders[0].legacy


def test_tight_tolerance_splits_setups(project: Path):
	cfg = ShotListConfig(position_tolerance_m=0.1)
	report = get_shot_list_for_project(project / "film.fountain", cfg=cfg)
	assert [s["shots"] for s in report.to_dict()["scenes"][0]["setups"]] == [["A"], ["C"], ["D"]]


class TestCli:
	def test_project_to_file(self, project: Path, capsys):
		from board2shotlist.cli import main

		out = project / "out" / "shotlist.json"
		main(["project", "--script", str(project / "film.fountain"), "--out", str(out)])

		assert "[OK]" in capsys.readouterr().out
		data = json.loads(out.read_text(encoding="utf-8"))
		assert len(data["scenes"]) == 2

	def test_project_to_stdout_is_pure_json(self, project: Path, capsys):
		from board2shotlist.cli import main

		main(["-v", "project", "--script", str(project / "film.fountain")])

		# 进度日志走 stderr，stdout 只有报告本身
		data = json.loads(capsys.readouterr().out)
		assert len(data["scenes"]) == 2

	def test_scene_to_stdout(self, project: Path, capsys):
		from board2shotlist.cli import main

		path = project / "storyboards" / SCENE_2 / f"{SCENE_2}.storyboarder"
		main(["scene", "--storyboard", str(path), "--position_tolerance_m", "6"])

		data = json.loads(capsys.readouterr().out)
		assert data["setups"][0]["shots"] == ["E", "F", "G"]
		assert data["shots"][0]["setupNumber"] == 1

	def test_folders(self, project: Path, capsys):
		from board2shotlist.cli import main

		(project / "storyboards" / SCENE_2 / f"{SCENE_2}.storyboarder").unlink()
		main(["folders", "--script", str(project / "film.fountain")])

		out = capsys.readouterr().out
		assert f"[OK] {SCENE_1}" in out
		assert f"[MISSING] {SCENE_2}" in out

	def test_folders_marks_legacy_name(self, project: Path, capsys):
		from board2shotlist.cli import main

		(project / "storyboards" / SCENE_1 / f"{SCENE_1}.storyboarder").unlink()
		_write_storyboard(project, LEGACY_SCENE_1, [_board("A", 0)])
		main(["folders", "--script", str(project / "film.fountain")])

		out = capsys.readouterr().out
		assert f"[OK] {LEGACY_SCENE_1} (legacy name)" in out
		assert f"[OK] {SCENE_2}\n" in out

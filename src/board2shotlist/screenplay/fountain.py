# -*- coding: utf-8 -*-
"""
board2shotlist/screenplay/fountain.py

这个文件做什么：
- 纯规则的 Fountain 剧本读取器：文本 -> tokens -> 节点（scene/section）。
- 只识别 shot list 需要的结构，不追求完整的 Fountain 语法（强调、居中排版等不处理）。

识别规则（简化但够用）：
1) 开头的标题页（Title:/Author: ... 到第一个空行）单独解析，不进 tokens
2) boneyard（/* ... */）和注释（[[ ... ]]）先整体删掉
3) 空行之后以 INT/EXT/EST/INT./EXT/INT/EXT/I/E 开头的行是场景标题；以单个 '.' 开头是强制场景标题
4) 场景标题末尾的 #...# 是场景编号；#N-ID# 同时带编号和 scene_id
5) '= ' 开头是简介（synopsis），'#' 开头是段落（section），'===' 是分页
6) 空行之后的全大写行（下一行非空）是角色名，后面连续的非空行是台词/括号注释
7) 其它都当 action

scene_id 缺省时由编号 + 场景标题派生（sha1 前 8 位），同一份剧本反复解析结果不变。
"""

from __future__ import annotations

import hashlib
import re
from typing import Any, Dict, List, Optional, Tuple

_TITLE_KEY_RE = re.compile(
	r"^(title|credit|author|authors|source|draft date|date|contact|copyright|notes|revision)\s*:(.*)$",
	flags=re.IGNORECASE,
)
_BONEYARD_RE = re.compile(r"/\*.*?\*/", flags=re.DOTALL)
_NOTE_RE = re.compile(r"\[\[.*?\]\]", flags=re.DOTALL)

_HEADING_RE = re.compile(r"^(int\.?/ext|int/ext|i/e|int|ext|est)[. ]", flags=re.IGNORECASE)
_FORCED_HEADING_RE = re.compile(r"^\.[^.]")
_SCENE_NUMBER_RE = re.compile(r"\s*#([^#\s]+)#\s*$")
_TRANSITION_RE = re.compile(r"^[A-Z0-9 .\-']+TO:$")
_PAGE_BREAK_RE = re.compile(r"^\s*={3,}\s*$")


def _split_title_page(lines: List[str]) -> Tuple[Dict[str, str], List[str]]:
	first = next((i for i, line in enumerate(lines) if line.strip()), None)
	if first is None or not _TITLE_KEY_RE.match(lines[first].strip()):
		return {}, lines

	title_page: Dict[str, str] = {}
	key = ""
	i = first
	while i < len(lines) and lines[i].strip():
		line = lines[i]
		m = _TITLE_KEY_RE.match(line.strip())
		if m and not line[:1].isspace():
			key = m.group(1).lower()
			title_page[key] = m.group(2).strip()
		elif key:
			# 多行取值：缩进的续行
			title_page[key] = (title_page[key] + "\n" + line.strip()).strip()
		i += 1

	return title_page, lines[i:]


def _is_heading(line: str) -> bool:
	return _HEADING_RE.match(line) is not None or _FORCED_HEADING_RE.match(line) is not None


def _is_character(line: str, next_line: str) -> bool:
	if line.startswith("@"):
		return True
	if not next_line.strip():
		return False

	name = re.sub(r"\(.*?\)", "", line).replace("^", "").strip()
	return bool(name) and any(ch.isalpha() for ch in name) and name == name.upper()


def _heading_token(line: str) -> Dict[str, Any]:
	text = line[1:] if _FORCED_HEADING_RE.match(line) else line
	scene_number = None

	m = _SCENE_NUMBER_RE.search(text)
	if m:
		scene_number = m.group(1)
		text = text[:m.start()]

	return {"type": "scene_heading", "text": text.strip(), "scene_number": scene_number}


def tokenize(text: str) -> Tuple[Dict[str, str], List[Dict[str, Any]]]:
	text = text.replace("\r\n", "\n").replace("\r", "\n")
	text = _BONEYARD_RE.sub("", text)
	text = _NOTE_RE.sub("", text)

	title_page, lines = _split_title_page(text.split("\n"))
	lines = [line.rstrip() for line in lines]

	tokens: List[Dict[str, Any]] = []
	i = 0
	prev_blank = True

	while i < len(lines):
		line = lines[i].strip()
		next_line = lines[i + 1] if i + 1 < len(lines) else ""

		if not line:
			prev_blank = True
			i += 1
			continue

		if _PAGE_BREAK_RE.match(line):
			tokens.append({"type": "page_break", "text": ""})
		elif line.startswith("#"):
			depth = len(line) - len(line.lstrip("#"))
			tokens.append({"type": "section", "text": line[depth:].strip(), "depth": depth})
		elif line.startswith("="):
			tokens.append({"type": "synopsis", "text": line[1:].strip()})
		elif prev_blank and _is_heading(line):
			tokens.append(_heading_token(line))
		elif prev_blank and line.startswith(">") and not line.endswith("<"):
			tokens.append({"type": "transition", "text": line[1:].strip()})
		elif prev_blank and _TRANSITION_RE.match(line) and not next_line.strip():
			tokens.append({"type": "transition", "text": line})
		elif prev_blank and not line.startswith("!") and _is_character(line, next_line):
			tokens.append({"type": "character", "text": line.lstrip("@").strip()})
			i += 1
			# 角色名之后直到空行：括号注释 / 台词
			while i < len(lines) and lines[i].strip():
				part = lines[i].strip()
				kind = "parenthetical" if part.startswith("(") and part.endswith(")") else "dialogue"
				tokens.append({"type": kind, "text": part})
				i += 1
			prev_blank = False
			continue
		else:
			tokens.append({"type": "action", "text": line.lstrip("!")})

		prev_blank = False
		i += 1

	return title_page, tokens


def derive_scene_id(scene_number: str, slugline: str) -> str:
	digest = hashlib.sha1(f"{scene_number}:{slugline}".encode("utf-8")).hexdigest()
	return digest[:8].upper()


def _split_scene_number(raw: Optional[str], fallback: int) -> Tuple[str, Optional[str]]:
	"""#3-abc123# -> ("3", "abc123")；#12A# -> ("12A", None)；没有编号用流水号。"""
	if not raw:
		return str(fallback), None

	number, sep, scene_id = raw.partition("-")
	if sep and number and scene_id:
		return number, scene_id
	return raw, None


def parse(text: str) -> Dict[str, Any]:
	title_page, tokens = tokenize(text)
	return {"title_page": title_page, "tokens": tokens}


def parse_nodes(tokens: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
	nodes: List[Dict[str, Any]] = []
	scene: Optional[Dict[str, Any]] = None
	count = 0

	for t in tokens:
		kind = t["type"]

		if kind == "section":
			scene = None
			nodes.append({"type": "section", "text": t["text"], "depth": t["depth"]})
			continue

		if kind == "scene_heading":
			count += 1
			number, scene_id = _split_scene_number(t.get("scene_number"), count)
			slugline = t["text"]
			scene = {
				"type": "scene",
				"scene_number": number,
				"scene_id": scene_id or derive_scene_id(number, slugline),
				"slugline": slugline,
				"synopsis": "",
			}
			nodes.append(scene)
			continue

		# 简介只挂在当前场景上，第一条为准
		if kind == "synopsis" and scene is not None and not scene["synopsis"]:
			scene["synopsis"] = t["text"]

	return nodes


def get_scenes(tokens: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
	return [n for n in parse_nodes(tokens) if n["type"] == "scene"]


class FountainParser:
	"""把模块级函数包成 ScreenplayParser 协议的实现。"""

	def parse(self, text: str) -> Dict[str, Any]:
		return parse(text)

	def parse_nodes(self, tokens: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
		return parse_nodes(tokens)

	def get_scenes(self, tokens: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
		return get_scenes(tokens)

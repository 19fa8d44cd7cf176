# -*- coding: utf-8 -*-
"""Fountain 剧本读取测试。"""

from __future__ import annotations

from board2shotlist.screenplay import FountainParser
from board2shotlist.screenplay.fountain import derive_scene_id, get_scenes, parse, parse_nodes


SCRIPT = """Title: Test Film
Author: Someone
Draft date: 2026-10-01

# Act One

INT. HOUSE - DAY #1-abc123#

= The Hero's Journey: Part One (Director's Cut)

Mara enters. [[fix blocking]]

MARA
(quietly)
Hello?

CUT TO:

EXT. STREET - NIGHT

= Chase.

= A second synopsis is ignored.

Cars pass.

/* INT. CUT SCENE - DAY */

.FLASHBACK #3#

===

int. kitchen - morning
"""


class TestTokens:
	def test_title_page(self):
		parsed = parse(SCRIPT)
		assert parsed["title_page"]["title"] == "Test Film"
		assert parsed["title_page"]["author"] == "Someone"
		assert parsed["title_page"]["draft date"] == "2026-10-01"

	def test_token_types(self):
		tokens = parse(SCRIPT)["tokens"]
		types = [t["type"] for t in tokens]
		assert types[:3] == ["section", "scene_heading", "synopsis"]
		assert "character" in types
		assert "parenthetical" in types
		assert "dialogue" in types
		assert "transition" in types
		assert "page_break" in types

		char = next(t for t in tokens if t["type"] == "character")
		assert char["text"] == "MARA"
		action = next(t for t in tokens if t["type"] == "action")
		assert action["text"] == "Mara enters."

	def test_boneyard_removed(self):
		tokens = parse(SCRIPT)["tokens"]
		assert not any("CUT SCENE" in t["text"] for t in tokens)

	def test_no_title_page(self):
		parsed = parse("EXT. FIELD - DAY\n\nWind.\n")
		assert parsed["title_page"] == {}
		assert parsed["tokens"][0]["type"] == "scene_heading"


class TestScenes:
	def test_scenes_in_order(self):
		scenes = get_scenes(parse(SCRIPT)["tokens"])
		assert [s["slugline"] for s in scenes] == [
			"INT. HOUSE - DAY",
			"EXT. STREET - NIGHT",
			"FLASHBACK",
			"int. kitchen - morning",
		]
		assert [s["scene_number"] for s in scenes] == ["1", "2", "3", "4"]

	def test_scene_number_with_id(self):
		first = get_scenes(parse(SCRIPT)["tokens"])[0]
		assert first["scene_id"] == "abc123"
		assert first["synopsis"] == "The Hero's Journey: Part One (Director's Cut)"

	def test_first_synopsis_wins(self):
		second = get_scenes(parse(SCRIPT)["tokens"])[1]
		assert second["synopsis"] == "Chase."

	def test_derived_scene_id_is_stable(self):
		a = get_scenes(parse(SCRIPT)["tokens"])
		b = get_scenes(parse(SCRIPT)["tokens"])
		assert a[2]["scene_id"] == b[2]["scene_id"] == derive_scene_id("3", "FLASHBACK")
		assert len(a[2]["scene_id"]) == 8

	def test_nodes_include_sections(self):
		nodes = parse_nodes(parse(SCRIPT)["tokens"])
		assert nodes[0] == {"type": "section", "text": "Act One", "depth": 1}
		assert [n["type"] for n in nodes].count("scene") == 4

	def test_parser_protocol(self):
		p = FountainParser()
		tokens = p.parse(SCRIPT)["tokens"]
		assert p.get_scenes(tokens) == [n for n in p.parse_nodes(tokens) if n["type"] == "scene"]

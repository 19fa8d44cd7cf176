# -*- coding: utf-8 -*-
from .board import Board, Camera, SceneGraph
from .shotlist import Beat, CameraDelta, ProjectReport, SceneReport, Setup, Shot, describe_camera

__all__ = [
	"Board",
	"Camera",
	"SceneGraph",
	"Beat",
	"CameraDelta",
	"ProjectReport",
	"SceneReport",
	"Setup",
	"Shot",
	"describe_camera",
]

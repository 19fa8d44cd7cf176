# -*- coding: utf-8 -*-
from .base import ScreenplayParser
from .fountain import FountainParser

__all__ = ["ScreenplayParser", "FountainParser"]

# -*- coding: utf-8 -*-
"""
board2shotlist：分镜板（storyboard）+ 剧本（Fountain）-> 镜头清单（shot list）。
"""

__version__ = "0.1.0"

# -*- coding: utf-8 -*-
"""
board2shotlist/__main__.py

支持 `python -m board2shotlist`，直接转发到 cli.main()。
"""

from .cli import main

if __name__ == "__main__":
	main()

"""
Build script for creating a standalone executable using PyInstaller.

Bundles the CLI application and its dependencies into a single `sassline`
executable.
"""

import PyInstaller.__main__  # type: ignore

PyInstaller.__main__.run(["main.py", "--onefile", "--name=sassline"])

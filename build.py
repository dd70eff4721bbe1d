"""
Build script for creating a standalone executable using PyInstaller.

This script bundles the CLI application and its dependencies into a single
executable file. The Go grammar ships as a compiled extension inside the
tree-sitter-go wheel, so it is collected explicitly.
"""

import PyInstaller.__main__  # type: ignore

PyInstaller.__main__.run(
    [
        "main.py",
        "--onefile",
        "--collect-all=tree_sitter_go",
        "--name=godict",
    ]
)

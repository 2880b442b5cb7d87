[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leveleditor"
version = "0.1.0"
description = "Tile-based level editor for grid platformer levels stored in run-length encoded .rll files"
requires-python = ">=3.10"
dependencies = []
keywords = ["level editor", "tiles", "game", "run-length encoding", "rll", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leveleditor = "leveleditor.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["leveleditor"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schaken"
version = "0.1.0"
description = "A two-player chess game on a Tk board, with move highlighting, undo/redo and save files"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "schaken", "board game", "tkinter", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schaken = "schaken.app:main"

[tool.hatch.build.targets.wheel]
packages = ["schaken"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

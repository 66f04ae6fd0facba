[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocktris"
version = "0.1.0"
description = "Terminal building blocks for a falling-block puzzle game: drawing, menus, scenes, scoring and score storage."
requires-python = ">=3.10"
dependencies = []
keywords = ["falling blocks", "puzzle", "terminal", "game", "console", "menus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blocktris"]

[tool.pytest.ini_options]
addopts = "-ra"

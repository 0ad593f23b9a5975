[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesboomer"
version = "0.1.0"
description = "Two-player competitive Minesweeper: game rules, JSON wire messages and a WebSocket game server"
requires-python = ">=3.10"
keywords = ["minesweeper", "game", "multiplayer", "websocket", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Framework :: AsyncIO",
    "Framework :: aiohttp",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
minesboomer-server = "minesboomer.server:main"

[tool.hatch.build.targets.wheel]
packages = ["minesboomer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

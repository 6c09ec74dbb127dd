[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termarte"
version = "0.1.0"
description = "Terminal art helpers: truecolour ANSI sprite sheets, terminal setup, key polling and simple background tasks"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["terminal", "ansi", "sprite", "truecolor", "animation", "keyboard"]
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
    "Topic :: Terminals",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termarte-async-demo = "termarte.async_tasks:main"
termarte-screen-info = "termarte.demos:screen_info_main"
termarte-key-codes = "termarte.demos:key_codes_main"
termarte-sprite-demo = "termarte.demos:sprite_main"

[tool.hatch.build.targets.wheel]
packages = ["termarte"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

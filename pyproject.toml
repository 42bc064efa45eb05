[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tftui"
version = "0.1.0"
description = "Immediate-mode widget toolkit for small RGB565 touch displays, with a virtual display simulator"
requires-python = ">=3.10"
keywords = ["tft", "lcd", "touchscreen", "widgets", "rgb565", "simulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tftui-demo = "tftui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tftui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

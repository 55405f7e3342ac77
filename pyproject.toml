[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rbxdatatypes"
version = "0.1.0"
description = "Pure-Python value types modelled on the Roblox engine datatypes: integer vectors, colors, sequences, UI dimensions, physical properties and enums."
requires-python = ">=3.10"
dependencies = []
keywords = ["roblox", "datatypes", "color3", "udim2", "numbersequence", "colorsequence", "enums"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rbxdatatypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

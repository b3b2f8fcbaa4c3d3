[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ligapro"
version = "1.0.0"
description = "Interactive tracker for a football league season: results, standings and top scorers"
requires-python = ">=3.10"
dependencies = []
keywords = ["football", "soccer", "league", "standings", "tournament"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ligapro = "ligapro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ligapro"]

[tool.pytest.ini_options]
addopts = "-ra"

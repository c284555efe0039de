[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omnicode"
version = "0.0.1"
description = "Watchtower logging core: severity scales, structured log entries, scroll and JSON log writers."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "severity", "alignment", "watchtower", "structured-logs"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
omnicode = "omnicode.watchtower:main"

[tool.hatch.build.targets.wheel]
packages = ["omnicode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

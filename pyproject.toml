[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loghier"
version = "1.1.0"
description = "Logging building blocks: events, filters, appenders, layouts, nested diagnostic contexts and printf-style formatting."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "appender", "layout", "ndc", "syslog", "printf"]
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
    "Topic :: System :: Logging",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["loghier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "styx"
version = "1.0.1"
description = "Building blocks for a small static-file HTTP/1.1 server configured by a JSON file."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "static-files", "web-server", "http11", "mime"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["styx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utf8kit"
version = "0.1.0"
description = "Small helpers for UTF-8 code point encoding, lead bytes and sorted-sequence ranges"
requires-python = ">=3.10"
dependencies = []
keywords = ["utf-8", "unicode", "encoding", "code point", "binary search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["utf8kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

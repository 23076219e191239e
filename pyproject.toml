[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embjson"
version = "0.1.0"
description = "A small JSON library with bounded memory buffers, a lenient parser and compact or pretty printing"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "parser", "serializer", "embedded", "pretty-print"]
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
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["embjson"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

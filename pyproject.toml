[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluentkit"
version = "1.0.0"
description = "Toolkit-independent building blocks for Fluent-style user interfaces: colours, themes, text styles, captchas, shapes, watermarks and table/tree models."
requires-python = ">=3.10"
dependencies = []
keywords = ["fluent", "ui", "theme", "colors", "table-model", "tree-model", "captcha", "watermark"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluentkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zalo"
version = "0.2.48"
description = "TextMate-style scopes, VSCode theme compilation, selector matching and CSS generation for code highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["syntax", "highlighting", "textmate", "vscode", "theme", "css", "scope"]
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
    "Topic :: Text Processing :: Markup",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zalo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

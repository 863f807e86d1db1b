[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mixinkit"
version = "0.1.0"
description = "Generate and remove TypeScript mixin files from a template and keep an auto-import entry file in sync."
requires-python = ">=3.10"
dependencies = []
keywords = ["typescript", "mixin", "code-generation", "template", "imports"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mixinkit = "mixinkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mixinkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

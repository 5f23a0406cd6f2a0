[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "htmlmark"
version = "0.1.0"
description = "Building blocks for converting HTML into Markdown: DOM clean-up passes, Markdown escaping checks and text helpers"
requires-python = ">=3.10"
keywords = ["html", "markdown", "dom", "escaping", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "html5lib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["htmlmark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

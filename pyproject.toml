[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "decasify"
version = "0.10.2"
description = "Cast strings to title case and other cases following locale specific style guides, including Turkish support"
requires-python = ">=3.10"
dependencies = []
keywords = ["titlecase", "case", "typography", "turkish", "style-guide", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
decasify = "decasify.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["decasify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

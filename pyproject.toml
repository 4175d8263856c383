[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vocabvault"
version = "0.1.2"
description = "Latin word helpers: roman numerals, spelling-trick tables, noun and adjective principal parts, and word-list selection"
requires-python = ">=3.10"
dependencies = []
keywords = ["latin", "dictionary", "vocabulary", "roman numerals", "linguistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Latin",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vocabvault"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calorietrack"
version = "0.1.0"
description = "A console diary for logging meals, tracking calories and reviewing daily nutrition."
requires-python = ">=3.10"
dependencies = []
keywords = ["calories", "diet", "nutrition", "food log", "health", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calorietrack = "calorietrack.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["calorietrack"]

[tool.pytest.ini_options]
addopts = "-ra"

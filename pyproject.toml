[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mockdemo"
version = "0.1.0"
description = "Small worked examples of interfaces and test doubles: summing, a human eating a chicken, and user registration."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "mocking", "dependency-injection", "protocols", "examples"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mockdemo-sum = "mockdemo.summing:main"
mockdemo-kitchen = "mockdemo.kitchen:main"
mockdemo-register = "mockdemo.controllers:main"

[tool.hatch.build.targets.wheel]
packages = ["mockdemo"]

[tool.hatch.build.targets.sdist]
include = ["mockdemo", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

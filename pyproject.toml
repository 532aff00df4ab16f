[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bettery"
version = "1.0.0"
description = "Battery runtime tracking and estimation for a watch face, with Bluetooth status and a text status display"
requires-python = ">=3.10"
dependencies = []
keywords = ["battery", "estimate", "runtime", "watchface", "monitoring", "bluetooth"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bettery = "bettery.main:main"

[tool.hatch.build.targets.wheel]
packages = ["bettery"]

[tool.hatch.build.targets.sdist]
include = ["bettery", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

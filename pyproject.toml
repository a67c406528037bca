[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "semcore"
version = "0.1.0"
description = "Core building blocks for event-driven embedded-style code: signals and slots, fixed-size buffers, intrusive lists and queues, fixed-size arrays, error tracing, debug output and an I2C bus scanner."
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "signals", "slots", "ring buffer", "linked list", "queue", "i2c"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["semcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamcore"
version = "0.1.0"
description = "Building blocks for an incremental build engine: delegates, dispatch queues, worker thread pools, execution statistics and a node registry."
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "build-system", "delegates", "dispatcher", "thread-pool", "multicast"]
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
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yamcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

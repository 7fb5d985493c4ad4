[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tally"
version = "0.1.0"
description = "Metric building blocks: histogram buckets, identity hashing, tag caches, size-counting transports and call instrumentation"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "histogram", "buckets", "instrumentation", "monitoring", "murmur3"]
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
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tally"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

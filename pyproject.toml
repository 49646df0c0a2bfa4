[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpuwindow"
version = "0.1.0"
description = "Sliding-window CPU usage statistics for the current process"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpu", "rusage", "monitoring", "profiling", "usage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
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
cpuwindow = "cpuwindow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpuwindow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysshell"
version = "0.1.0"
description = "An in-memory file-system shell and a /proc-based system resource monitor"
requires-python = ">=3.10"
keywords = ["shell", "virtual filesystem", "system monitor", "procfs", "cpu", "memory", "network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: System :: Monitoring",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysshell = "sysshell.shell:main"
sys-monitor = "sysshell.monitor:main"

[tool.hatch.build.targets.wheel]
packages = ["sysshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

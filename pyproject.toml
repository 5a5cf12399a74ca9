[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotelsim"
version = "0.1.0"
description = "A small TCP hotel simulation: a room-booking server, a live monitor and a random check-in client"
requires-python = ">=3.10"
dependencies = []
keywords = ["hotel", "simulation", "tcp", "socket", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hotelsim-server = "hotelsim.server:main"
hotelsim-monitor = "hotelsim.monitor:main"
hotelsim-randclient = "hotelsim.randclient:main"

[tool.hatch.build.targets.wheel]
packages = ["hotelsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

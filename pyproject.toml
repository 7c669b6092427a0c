[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysdrills"
version = "0.1.0"
description = "Small runnable drills on simulated processes, sockets and thread synchronisation"
requires-python = ">=3.10"
dependencies = []
keywords = ["threads", "processes", "sockets", "mutex", "condition-variable", "signals", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysdrills-fork = "sysdrills.processes:main"
sysdrills-serve = "sysdrills.filetransfer:server_main"
sysdrills-send = "sysdrills.filetransfer:client_main"
sysdrills-sharing = "sysdrills.sharing:main"
sysdrills-curtains = "sysdrills.curtains:main"
sysdrills-rooms = "sysdrills.rooms:main"
sysdrills-reaper = "sysdrills.reaper:main"
sysdrills-ordering = "sysdrills.ordering:main"

[tool.hatch.build.targets.wheel]
packages = ["sysdrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysdemos"
version = "0.1.0"
description = "Small worked examples of systems programming: sorting and searching, linked lists, DTMF detection in WAV files, IPC, signals, timing, MTD access and network interface queries."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "linked-list",
    "dtmf",
    "goertzel",
    "wav",
    "ipc",
    "unix-socket",
    "signals",
    "mtd",
    "network-interfaces",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysdemos-sort = "sysdemos.sorting:main"
sysdemos-search = "sysdemos.searching:main"
sysdemos-slist = "sysdemos.singly_linked:main"
sysdemos-dlist = "sysdemos.doubly_linked:main"
sysdemos-dtmf = "sysdemos.dtmf_cli:main"
sysdemos-strings = "sysdemos.strings:main"
sysdemos-fileops = "sysdemos.fileops:main"
sysdemos-gold-mine = "sysdemos.gold_mine:main"
sysdemos-select = "sysdemos.select_pipes:main"
sysdemos-socket = "sysdemos.local_socket:main"
sysdemos-timing = "sysdemos.timing:main"
sysdemos-signals = "sysdemos.signals_demo:main"
sysdemos-backtrace = "sysdemos.backtrace_demo:main"
sysdemos-perf = "sysdemos.perf_loop:main"
sysdemos-mtdctl = "sysdemos.mtdctl:main"
sysdemos-shared-mine = "sysdemos.shared_mine:main"
sysdemos-iface = "sysdemos.iface:main"

[tool.hatch.build.targets.wheel]
packages = ["sysdemos"]

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

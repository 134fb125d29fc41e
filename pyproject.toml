[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipechat"
version = "0.1.0"
description = "Terminal chat over named pipes (FIFOs) on a POSIX machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "fifo", "named-pipe", "ipc", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipechat-user = "pipechat.user:main"
pipechat-discord = "pipechat.discord:main"

[tool.hatch.build.targets.wheel]
packages = ["pipechat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

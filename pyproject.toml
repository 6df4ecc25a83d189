[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oscamp"
version = "0.1.0"
description = "Small operating-system and concurrency building blocks: allocators, descriptor tables, atomics, channels, async tasks, pipes and page-table simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "concurrency",
    "allocator",
    "atomics",
    "channels",
    "page-table",
    "sv39",
    "tlb",
    "asyncio",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["oscamp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

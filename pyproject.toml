[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Classic data structures and algorithms: an LRU cache, queues, linked lists, array, bit and string drills, and small TCP services."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "lru-cache",
    "queue",
    "linked-list",
    "sockets",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbook-client = "drillbook.net:client_main"
drillbook-server = "drillbook.net:server_main"
drillbook-sum-server = "drillbook.net:sum_server_main"

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

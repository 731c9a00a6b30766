[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbos"
version = "0.1.0"
description = "Threaded TCP service answering framed JSON API requests, with an AMQP message publisher"
requires-python = ">=3.10"
keywords = ["tcp", "amqp", "rabbitmq", "json", "server"]
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
    "Topic :: System :: Networking",
]
dependencies = [
    "pika",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cbos = "cbos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cbos"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderalloc"
version = "0.1.0"
description = "HTTP service that allocates order items to distribution centers and stores the orders in MongoDB"
requires-python = ">=3.10"
keywords = ["orders", "distribution-center", "allocation", "flask", "mongodb"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "pymongo",
    "requests",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
orderalloc = "orderalloc.server:main"

[tool.hatch.build.targets.wheel]
packages = ["orderalloc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true

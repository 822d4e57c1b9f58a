[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flashsale"
version = "0.1.0"
description = "A small JSON HTTP server for users and products, with flash-sale and order storage, backed by SQLite."
requires-python = ">=3.10"
keywords = ["flash-sale", "http", "api", "server", "fastapi", "sqlite", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: FastAPI",
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
    "fastapi",
    "pydantic>=2",
    "aiosqlite",
    "python-dotenv",
    "uvicorn",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "httpx",
]

[project.scripts]
flashsale = "flashsale.runtime:main"

[tool.hatch.build.targets.wheel]
packages = ["flashsale"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

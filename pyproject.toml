[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coreledger"
version = "0.1.0"
description = "Ledger service building blocks: fees, transaction statistics, API keys, Ed25519 signatures and a small Flask HTTP API"
requires-python = ">=3.10"
keywords = ["ledger", "accounting", "transactions", "fees", "wallet", "api", "ed25519", "rate-limit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Framework :: Flask",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]
dependencies = [
    "python-dotenv>=1.0",
    "cryptography>=41.0",
    "flask>=2.3",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[project.scripts]
coreledger = "coreledger.web:main"

[tool.hatch.build.targets.wheel]
packages = ["coreledger"]

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

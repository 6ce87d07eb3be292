[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpclient"
version = "0.1.0"
description = "HTTP client for a sensor-session REST API: users, authentication, sensors, sessions and sensor datapoints"
requires-python = ">=3.10"
keywords = ["http", "rest", "client", "sensors", "sessions", "api"]
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
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests>=2.28",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
tcp-client = "tcpclient.main:main"

[tool.hatch.build.targets.wheel]
packages = ["tcpclient"]

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
strict_optional = true

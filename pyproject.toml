[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopapi"
version = "1.0.0"
description = "Online shop REST API for managing products, backed by MySQL"
requires-python = ">=3.10"
keywords = ["rest", "api", "products", "shop", "flask", "mysql", "swagger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
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
    "pymysql",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shopapi = "shopapi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shopapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "folprover"
version = "0.1.0"
description = "Clauses, knowledge bases and search strategies for first-order resolution, plus a propositional resolution solver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logic",
    "resolution",
    "theorem-proving",
    "first-order-logic",
    "sat",
    "clauses",
    "knowledge-base",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
folprover-sat = "folprover.propositional:main"

[tool.hatch.build.targets.wheel]
packages = ["folprover"]

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

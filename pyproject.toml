[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "softmaxlearn"
version = "0.1.0"
description = "Softmax regression trained by mini-batch gradient descent, momentum or Nesterov updates, with small preprocessing helpers."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "softmax",
    "logistic regression",
    "classification",
    "gradient descent",
    "nesterov",
    "machine learning",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
softmaxlearn = "softmaxlearn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["softmaxlearn"]

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
ignore_missing_imports = true

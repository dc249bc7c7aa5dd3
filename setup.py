from setuptools import find_packages, setup

setup(
    name="fslink",
    version="0.1.0",
    description="fslink - track and toggle filesystem links for a project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9,<0.26",  # CLI framework (0.26+ vendors its own click, breaking click exception handling)
        "click",  # Context and exceptions used alongside Typer
        "pydantic>=2.0",  # Config, link records and output schemas
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Syntax highlighting of YAML/JSON output on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "fslink=fslink.cli:main",
        ],
    },
)

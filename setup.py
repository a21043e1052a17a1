from setuptools import find_packages, setup

setup(
    name="fsprobe",
    version="0.1.0",
    description="fsprobe - map filesystem operations to the change notifications the OS emits",
    packages=find_packages(include=["fsprobe", "fsprobe.*"]),
    python_requires=">=3.10",
    install_requires=[
        "watchdog>=4.0",  # File system monitoring (event_filter support)
        "pydantic>=2.0",  # Config and output schemas
        "typer>=0.9,<0.26",  # CLI (0.26+ bundles its own click, breaking click.get_current_context)
        "click>=8.0",  # CLI context lookup for the display format
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
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
            "fsprobe=fsprobe.cli:main",
        ],
    },
)

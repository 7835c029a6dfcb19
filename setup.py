from setuptools import find_packages, setup

setup(
    name="svcgen",
    version="0.1.0",
    description="Compile service definitions into launchd plists and systemd units",
    packages=find_packages(include=["svcgen", "svcgen.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Validated value models and host config
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-timeout>=2.1",
            "rich",  # Terminal formatting for scripts/
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)

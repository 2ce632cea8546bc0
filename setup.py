from setuptools import setup, find_packages

# Read version from package
version = {}
with open("src/plugin_logger/__init__.py") as f:
    for line in f:
        if line.startswith("__version__"):
            exec(line, version)
            break

setup(
    name="plugin_logger",
    version=version.get("__version__", "0.0.0"),
    description="Per-plugin file logger with a shared name-keyed registry",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)

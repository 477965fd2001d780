from importlib.util import module_from_spec, spec_from_file_location
import os
from pathlib import Path
import site

from setuptools import find_packages, setup

site.ENABLE_USER_SITE = True  # workaround https://github.com/pypa/pip/issues/7953

project_root = Path(__file__).parent
code_root = project_root / "graphql_fulldate"
os.chdir(str(project_root))
version_spec = spec_from_file_location("version", str(code_root / "metadata.py"))
version = module_from_spec(version_spec)
version_spec.loader.exec_module(version)

with open(project_root / "README.md", encoding="utf-8") as f:
    long_description = f.read()


def read_requirements(name: str) -> list:
    """Load the non-comment lines of a requirements file."""
    with open(project_root / name, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


setup(
    name=version.__package__.replace("_", "-"),
    description=version.__description__,
    long_description=long_description,
    long_description_content_type="text/markdown",
    version=version.__version__,
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    keywords=["graphql", "ariadne", "scalar", "date", "rfc3339"],
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements-test.txt")},
    entry_points={
        "console_scripts": ["graphql-fulldate=graphql_fulldate.__main__:run"],
    },
    package_data={"": ["*.md"]},
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)

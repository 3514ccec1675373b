import re
from pathlib import Path

from setuptools import setup, find_packages

_version_file = Path(__file__).parent / "src" / "nsdebug" / "_version.py"
VERSION = re.search(r'__version__ = "([^"]+)"', _version_file.read_text()).group(1)

setup(
    name="nsdebug",
    version=VERSION,
    description="Namespace-scoped debug output — DEBUG=app:*,-app:noisy style channel switches",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "nsdebug=nsdebug.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Debuggers",
    ],
    python_requires=">=3.10",
)

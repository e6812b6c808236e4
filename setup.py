# setup.py
from __future__ import annotations

from setuptools import find_packages, setup

install_requires: list[str] = [
    "numpy>=1.24",
    "Pillow>=10.0",
    "PyYAML>=6.0",
    "hypothesis>=6.80",
]

extras_require: dict[str, list[str]] = {
    "test": [
        "pytest>=7.4",
        "pytest-benchmark>=4.0",
    ],
}

setup(
    name="pixelcheck",
    version="0.1.0",
    description="Pixel buffer diffs, benchmark images and property-test generators",
    packages=find_packages(include=["pixelcheck", "pixelcheck.*"]),
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={"console_scripts": ["pixelcheck=pixelcheck.__main__:main"]},
)

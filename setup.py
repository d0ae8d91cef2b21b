"""setuptools setup for easeloop.

Install for development:
    pip install -e ".[test]"
    pytest
"""

from setuptools import setup, find_packages

setup(
    name="easeloop",
    version="0.1.0",
    description="Easing curves, loop-mode tweens and frame-driven timers",
    packages=find_packages(include=["easeloop", "easeloop.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

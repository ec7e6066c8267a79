"""Packaging for JetCounter.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "JetCounter",
        "CFBundleDisplayName": "JetCounter",
        "CFBundleIdentifier": "com.jetcounter.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

# Only pull in py2app when actually building the bundle.
py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = dict(
        app=APP,
        data_files=DATA_FILES,
        options={"py2app": OPTIONS},
        setup_requires=["py2app"],
    )

setup(
    name="JetCounter",
    version="0.1.0",
    description="A single-screen countdown timer built with PyQt6.",
    packages=find_packages(include=["jetcounter", "jetcounter.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6>=6.4"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"gui_scripts": ["jetcounter = jetcounter.__main__:main"]},
    **py2app_kwargs,
)

"""Setup for Potion Timer.

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
        "CFBundleName": "PotionTimer",
        "CFBundleDisplayName": "Potion Timer",
        "CFBundleIdentifier": "com.potiontimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

# py2app keywords are only understood when py2app itself is driving the build
extra = {}
if "py2app" in sys.argv:
    extra = dict(app=APP, data_files=DATA_FILES, options={"py2app": OPTIONS})

setup(
    name="PotionTimer",
    version="0.1.0",
    packages=find_packages(include=["potiontimer", "potiontimer.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "gui_scripts": ["potiontimer = potiontimer.__main__:main"],
    },
    **extra,
)

"""Setup for SplitSecond.

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
        "CFBundleName": "SplitSecond",
        "CFBundleDisplayName": "SplitSecond",
        "CFBundleIdentifier": "com.splitsecond.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

# py2app options only when bundling, so a plain install stays portable
app_kwargs = {}
if "py2app" in sys.argv:
    app_kwargs = dict(
        app=APP,
        data_files=DATA_FILES,
        options={"py2app": OPTIONS},
        setup_requires=["py2app"],
    )

setup(
    name="SplitSecond",
    version="0.1.0",
    description="Countdown and stopwatch timer engine with a PyQt6 front end",
    packages=find_packages(include=["splitsecond", "splitsecond.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6>=6.4"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"gui_scripts": ["splitsecond = splitsecond.__main__:main"]},
    **app_kwargs,
)

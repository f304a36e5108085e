#!/usr/bin/env python3

""" Build script for the Afterburner magic key highlighter. """

import glob
import os
import shutil
import subprocess
import sys

from setuptools import Command as stCommand, find_packages, setup


def iglob_all(*patterns):
    """ Yield each unique file path that matches one of many glob <patterns>. """
    seen = set()
    for pattern in patterns:
        for path in glob.iglob(pattern, recursive=True):
            if path not in seen:
                yield path
                seen.add(path)


class Command(stCommand):
    """ Setuptools command with default fields and methods defined. """
    user_options = []
    def initialize_options(self):
        self.args = []
    def finalize_options(self):
        pass


class CommandNamespace:
    """ Contains all command classes for use in setuptools.setup().
        Any command here may be run by name, e.g. > python3 setup.py clean. """

    class clean(Command):
        description = "Remove all build and test-generated files."
        def run(self):
            for path in iglob_all('.pytest_cache', 'build', 'dist', '*.egg-info', '**/__pycache__'):
                if os.path.isdir(path):
                    shutil.rmtree(path)
                elif os.path.exists(path):
                    os.remove(path)

    class run(Command):
        description = "Run from source."
        command_consumes_arguments = True
        def run(self):
            cmd = (sys.executable, '-m', 'afterburner_magic', *self.args)
            subprocess.run(cmd, check=True)

    class test(Command):
        description = "Run all unit tests."
        def run(self):
            import pytest
            pytest.main(['test'])


setup(
    name="afterburner-magic",
    version="1.0.0",
    description="Magic key highlighting for the Afterburner keyboard layout in touch-typing practice text.",
    python_requires=">=3.7",
    packages=find_packages(include=["afterburner_magic", "afterburner_magic.*"]),
    package_data={"afterburner_magic": ["assets/*.cson"]},
    extras_require={"gui": ["PyQt5"],
                    "test": ["pytest"]},
    entry_points={"console_scripts": ["afterburner-magic = afterburner_magic.__main__:main"]},
    cmdclass={k: v for k, v in vars(CommandNamespace).items() if not k.startswith("_")},
)

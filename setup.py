import os
import re

from setuptools import find_packages, setup

_HERE = os.path.dirname(os.path.abspath(__file__))


def _read_version() -> str:
    with open(os.path.join(_HERE, "src", "eddsa_poseidon", "__about__.py")) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("__version__ not found in __about__.py")
    return match.group(1)


if __name__ == "__main__":
    setup(
        name="eddsa-poseidon",
        version=_read_version(),
        description="EdDSA-Poseidon signatures over Baby Jubjub",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[],
        extras_require={"test": ["pytest"]},
    )

from pathlib import Path

from setuptools import find_packages, setup

version = (Path(__file__).parent / "logtest/VERSION").read_text("ascii").strip()


install_requires = [
    "Twisted>=21.7.0",
    "zope.interface>=5.1.0",
]
extras_require = {
    "test": [
        "pytest",
        "testfixtures",
    ],
}


setup(
    name="logtest",
    version=version,
    description="Capture and assert log records in tests",
    long_description=open("README.rst", encoding="utf-8").read(),
    license="BSD",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"logtest": ["VERSION"]},
    zip_safe=False,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development :: Testing",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
)

from setuptools import setup, find_packages

setup(
    name="svg-to-plantuml",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"svg2puml": ["config/*.yaml"]},
    install_requires=[
        "numpy",
        "Pillow",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "svg2puml=svg2puml.main:main",
        ],
    },
)

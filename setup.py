from setuptools import setup, find_packages

setup(
    name="cluster-installconfig",
    version="0.1.0",
    packages=find_packages(include=["installconfig", "installconfig.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "boto3",
        "pydantic>=2",
        "PyYAML",
        "rich",
        "typer",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "installconfig=installconfig.cli:main",
        ],
    },
)

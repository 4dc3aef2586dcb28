from setuptools import setup, find_packages

setup(
    name="wrapify",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "pyyaml",
        "inquirer",
        "tqdm",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "wrapify=wrapify.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Normalize whitespace and reflow paragraphs with lead or hanging indentation",
)

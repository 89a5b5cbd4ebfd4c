from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pbar",
    version="0.1.0",
    description="Text-based progress bar with determinate and indeterminate modes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    install_requires=[
        "colorama>=0.4.6"
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0'
        ]
    },
    entry_points={
        "console_scripts": [
            "pbar-demo=pbar.main:main"
        ],
    },
)

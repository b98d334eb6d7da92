from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="placesuggest",
    version="0.1.0",
    author="",
    author_email="",
    description="Autocomplete suggestions for place names",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "scripts", "scripts.*"]),
    include_package_data=True,
    package_data={
        'placesuggest': ['places/data/*.tsv'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.4.0",
        "pyarrow>=10.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)

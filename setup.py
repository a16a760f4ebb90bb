from setuptools import setup, find_packages

with open("README.md", 'r') as readme:
    long_description = readme.read()

setup(
    name="pymaps",
    version="1.0",
    description="Insertion-ordered and value-sorted map containers for python projects",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas"
    ],
    extras_require={
        "test": ["pytest"]
    }
)

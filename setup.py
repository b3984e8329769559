from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="specfun",
    version="0.1.0",
    author="David Beery",
    author_email="shakesbeery@gmail.com",
    description="Real-valued special functions: gamma sign, Pochhammer symbol and Bessel I0",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/Shakesbeery/specfun",
    project_urls={
        "Bug Tracker": "https://github.com/Shakesbeery/specfun/issues",
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24",
        "scipy>=1.10",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "sympy>=1.12",
        ],
    },
    include_package_data=True,
)

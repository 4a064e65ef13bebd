from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="funcascade",
    version="0.1",
    description="Evaluate fun(x, y, z) through a cascade of fallback algorithms over an interpolated lookup table",
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points = {
        'console_scripts': ['funcascade=funcascade:main'],
    },
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "beautifultable>=1.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)

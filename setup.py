from setuptools import setup, find_packages

setup(
    name="heap_basics",
    version="0.1.0",
    packages=find_packages(),
    python_requires=">=3.8",
    extras_require={
        "test": [
            "numpy",
            "psutil",
            "pytest",
        ],
    },
    zip_safe=False,
)

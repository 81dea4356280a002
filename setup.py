# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="calltree",
    version="0.1.0",
    description="Build call-frequency trees from profiler stack traces",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["calltree*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'calltree=calltree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

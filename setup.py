"""
Setup script for the lambda exercises.

To install for development:
    pip install -e .[test]

To run the exercises:
    python -m lambda_exercises
"""

from setuptools import setup

# Setup configuration
setup(
    name='lambda_exercises',
    version='1.0.0',
    description='Sorting numeric strings with lambda comparators and calling functions through function values',
    author='Lambda Exercises Team',
    packages=['lambda_exercises'],
    install_requires=[
        'numpy>=1.20.0',
        'psutil>=5.8.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.7',
    zip_safe=False,
)

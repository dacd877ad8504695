"""
Set up package.
Required modules: pydantic (config.py), toolz (functions.py, objects.py)
Test modules: pytest, hypothesis
"""
from setuptools import setup, find_packages

setup(
    name='optica',
    version='0.1',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    python_requires='>=3.10',
    install_requires=[
        'pydantic>=2',
        'toolz',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
)

from setuptools import setup

setup(
    name='rationals',
    version='0.1.0',
    description='Exact rational arithmetic over arbitrary precision integers',
    python_requires='>=3.8',
    install_requires=[
        'gmpy2',
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'rationals',
    ],
)

# setup.py
from setuptools import setup

setup(
    name='basin-coding',
    version='0.1.0',
    description='Range-coded binary-to-text encoding for any alphabet of 2 to 256 symbols',
    python_requires='>=3.8',
    py_modules=[
        'alphabet',
        'arithmetic_coding',
        'basin_codec',
        'benchmark_worker',
        'decoder',
        'encoder',
        'errors',
        'roundtrip_harness',
        'stress_test_worker',
        'symbolReadWrite',
        'utils',
    ],
    install_requires=[
        'numpy',
        'pandas',
        'psutil',
        'tqdm',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'basin-roundtrip=roundtrip_harness:main',
        ],
    },
)

from setuptools import setup

setup(
    name='pyfeatq',
    version='0.1.0',
    description='Chromosome-name tolerant queries over indexed genomic feature files',
    install_requires=['pandas', 'numpy', 'pysam'],
    extras_require={'test': ['pytest']},
    packages=['pyfeatq'],
    python_requires='>=3.10',
    zip_safe=False
)

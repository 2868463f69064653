'''
Install the sitemaps package and its command line program.
'''
from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent

# Get version
version = {}
with (here / "sitemaps" / "version.py").open() as f:
    exec(f.read(), version)

setup(
    name='sitemaps',
    version=version['__version__'],
    description='Read and write files in the Sitemaps XML format',
    python_requires=">=3.8",
    keywords='sitemap sitemaps xml crawler',
    packages=find_packages(exclude=['conf', 'tests']),
    install_requires=[
        'aiohttp',
        'lxml',
        'python-dateutil',
        'rich',
        'w3lib',
        'yarl',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'sitemaps=sitemaps.__main__:main',
        ],
    },
)

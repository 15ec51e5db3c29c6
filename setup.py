from setuptools import setup, find_packages
import re


with open('README.md', 'r') as fh:
    long_description = fh.read()


version_str = None
VERSION_FILE = "seqstats/_version.py"
with open(VERSION_FILE, "rt") as vh:
    for _line in vh:
        mo = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", _line, re.M)
        if mo:
            version_str = mo.group(1)
            break

if version_str is None:
    raise RuntimeError("Unable to find version string in {}".format(VERSION_FILE))


setup(
    name='seqstats',
    description='Summary statistics and N50 for FASTA and FASTQ sequence files',
    long_description=long_description,
    long_description_content_type='text/markdown',
    version=version_str,
    platforms='Linux-86_x64',
    packages=find_packages(exclude=['tests']),
    license='GNU General Public License v3',
    zip_safe=False,

    install_requires=[
        'numpy',
        'pyyaml',
        'toml',
        'tqdm'
    ],

    extras_require={
        'test': [
            'pytest',
            'biopython'
        ]
    },

    classifiers=[
        'Programming Language :: Python :: 3.11',
        'License :: OSI Approved :: GNU General Public License v3',
        'Operating System :: POSIX :: Linux',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'Development Status :: 5 - Production/Stable'
    ],

    entry_points={
        'console_scripts': ['seqstats=seqstats.command_line:main'],
    }
)

# -*- coding: utf-8; -*-

import io
import os
import re

from setuptools import setup


metadata = {}
with io.open(os.path.join('tagpolice', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst') as f:
    long_description = f.read()

# Shields reflect current status; they belong in the README on Git master,
# not in versions published on PyPI.
long_description = re.sub(r'^\.\. status:.*?\n\n', '', long_description,
                          flags=re.DOTALL | re.MULTILINE)

setup(
    name='TagPolice',
    version=metadata['version'],
    description='Validator and canonicalizer for BCP 47 language tags',
    long_description=long_description,
    url=metadata['homepage'],
    license='MIT',

    python_requires='>=3.6',
    install_requires=[
        'lxml >= 3.6.0',
        'dominate >= 2.2.0',
        'defusedxml >= 0.5.0',
    ],
    extras_require={
        'test': [
            'pytest >= 3.0.0',
        ],
    },

    packages=[
        'tagpolice',
        'tagpolice.inputs',
        'tagpolice.known',
        'tagpolice.reports',
        'tagpolice.util',
    ],
    package_data={
        'tagpolice': ['notices.xml'],
        'tagpolice.reports': ['html.css'],
    },
    entry_points={
        'console_scripts': [
            'tagpolice=tagpolice.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Internationalization',
        'Topic :: Software Development :: Quality Assurance',
        'Topic :: Text Processing :: Linguistic',
    ],
    keywords='BCP47 RFC5646 language tag locale lint validator canonical',
)

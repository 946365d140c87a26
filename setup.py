#!/usr/bin/env python
"""setup.py

Defines the setup instructions for moji

Copyright (C) 2016  Timothy Edmund Crosley

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
documentation files (the "Software"), to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software, and
to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or
substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED
TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
OTHER DEALINGS IN THE SOFTWARE.

"""
from setuptools import setup

with open('README.md', encoding='utf-8') as f:  # Loads in the README for PyPI
    long_description = f.read()


setup(
    name='moji',
    version='1.0.0',
    description='Resolve emoji by name and build flag emoji from ISO 3166 codes.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Timothy Crosley',
    author_email='timothy.crosley@gmail.com',
    license="MIT",
    entry_points={
        'console_scripts': [
            'moji = moji.cli:terminal',
        ]
    },
    packages=['moji'],
    install_requires=['falcon>=4.0', 'requests'],
    tests_require=['pytest'],
    extras_require={'test': ['pytest']},
    python_requires=">=3.7",
    keywords='Emoji, Unicode, Flags, ISO 3166, Python, Python3',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Environment :: Console',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Utilities'
    ]
)

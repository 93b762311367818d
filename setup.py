#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes']
test_requires = ['tox', 'pytest']

setup(
    name='fpkit',
    version='0.1.0',
    packages=['fpkit'],
    install_requires = requires,
    extras_require = {
        'test': test_requires,
    },
    license='MIT',
    description='curried combinators over mappings, iterables and lazy cursors.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)

#!/usr/bin/env python
# coding: utf-8

import setuptools

with open('README.md', 'r') as f:
    long_description = f.read()

setuptools.setup(
    name='minimisCplx',
    version='0.0.1',
    description='A small complex-number value type over a generic scalar field',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Xinxian Chen',
    author_email='vinylogy9@gmail.com',
    license='GNU GPLv3',
    classifiers=[
        'Topic :: Scientific/Engineering :: Mathematics'
    ],
    packages=setuptools.find_namespace_packages(include=['minicplx', 'minicplx.*']),
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={'test': ['pytest', 'sympy']},
)

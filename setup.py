"""Setup script for forth."""
import re
from setuptools import setup, find_packages  # type: ignore

with open('forth/__init__.py') as init_file:
    version = re.search(
        r"^version = '([^']+)'", init_file.read(), re.MULTILINE
    ).group(1)

setup(
    name='forth',
    version=version,
    description='A small Forth dialect with textual word macros',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Interpreters',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='forth stack concatenative',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.12',
    install_requires=[
        'parsy>=1.3.0,<3',
        'typing-extensions>=4',
    ],
    extras_require={
        'test': [
            'coverage>=6.4.4',
            'hypothesis>=6',
        ],
        'dev': ['mypy>=1.1.1'],
    },
)

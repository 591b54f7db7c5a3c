"""Setup script for gatelex."""
from setuptools import setup, find_packages  # type: ignore
import gatelex

setup(
    name='gatelex',
    version=gatelex.version,
    description='A lexer for logic gate expressions over numbered terminals',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Compilers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='lexer logic-gates',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.12',
    install_requires=[
        'parsy>=2,<3',
        'typing-extensions>=4',
    ],
    extras_require={
        'test': [
            'coverage>=6.4.4',
            'hypothesis>=6',
            'pytest>=7',
            'scripttest',
        ],
        'dev': ['mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)

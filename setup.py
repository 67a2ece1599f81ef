from setuptools import setup, find_packages

setup(
    name='knit-bundler',
    version='0.1.0',
    py_modules=['knit', 'knitter'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'lark>=1.1',
        'pydantic>=2.0',
        'watchdog>=2.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'knit = knit:main',
        ],
    },
)

from setuptools import setup, find_packages

setup(
    name             = 'grognet-xml2csv',
    version          = '1.0.0',
    description      = 'Grognet Xml2Csv — flatten XML row dumps into one classified CSV',
    author           = 'Grognet',
    packages         = find_packages(exclude=['tests*']),
    install_requires = [l for l in open('requirements.txt').read().splitlines() if l and not l.startswith('#')],
    extras_require   = {
        'test': ['pytest'],
    },
    entry_points     = {
        'console_scripts': [
            'xml2csv = xml2csv.cli:main',
        ],
    },
    python_requires  = '>=3.10',
    classifiers      = [
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)

from setuptools import setup
import sys
if sys.version_info < (3,10):
    sys.exit('pgservice requires at least Python version 3.10.\nYou are currently running this installation with\n\n{}'.format(sys.version))

setup(
    name = 'pgservice',
    packages = [
        'pgservice',
    ],
    entry_points = {
        'console_scripts': [
            'pgservice = pgservice.cli:cli',
        ],
    },
    version = '0.1.0',
    description = 'PostgreSQL connection service file reader',
    keywords = [
        'postgres',
        'pg_service',
        'libpq'
    ],
    classifiers = [
        'Topic :: Database',
        'License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)',
        'Intended Audience :: System Administrators',
        'Intended Audience :: Information Technology',
        'Development Status :: 4 - Beta'
    ],
    install_requires = [
        'psycopg[binary]>=3.1',
        'pydantic>=2',
        'PyYAML'
    ],
    extras_require = {
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.10",
)

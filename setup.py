from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = [line for line in f.read().splitlines() if line and not line.startswith('#')]

setup(
    name = 'dirconf',
    version = '0.1.0',
    description = 'Directory-backed configuration provider with live reload',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': [
            'pytest>=7.4',
            'pytest-cov>=4.1',
        ],
    },
)

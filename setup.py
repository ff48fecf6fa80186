from setuptools import setup, find_packages

setup(
    name="bitevo",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        # System
        'python-dotenv',

        # Numerics and tables
        'numpy>=1.17',
        'pandas',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'pytest-mock>=3.10.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'bitevo = bitevo.cli.evolve:main',
        ],
    },
    include_package_data=True,
    description="Minimal binary-string genetic algorithm engine",
)

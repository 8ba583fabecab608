from setuptools import setup, find_packages

setup(
    name="token_race",
    version="0.1.0",
    packages=find_packages(include=["token_race", "token_race.*"]),
    install_requires=[
        "numpy>=1.24.3",
        "tqdm>=4.65.0",
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'token-race=token_race.cli.main:cli',
        ],
    },
    python_requires=">=3.9",
)

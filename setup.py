# setup.py
from setuptools import setup, find_packages

setup(
    name="awareness_scout",
    version="0.1.0",
    description="Извлечение сигналов узнаваемости с сайта и определение домашнего метро",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"awareness_scout.data": ["*.yaml"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "awareness-scout=awareness_scout.cli:main",
        ],
    },
    python_requires=">=3.11",
)

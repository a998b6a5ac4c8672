# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap_stream",
    version="0.1.0",
    description="Потоковые итераторы по XML и текстовым sitemap",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "lxml>=4.9",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "click>=8.2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "sitemap-stream=sitemap_stream.cli:cli",
        ],
    },
    python_requires=">=3.11",
)

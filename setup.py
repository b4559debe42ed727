#!/usr/bin/env python3
"""
Design Engine Setup
"""

from setuptools import setup, find_packages

# Read requirements from requirements.txt
with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="design-engine",
    version="1.0.0",
    description="HTML and CSS to design tree layout and style resolution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Design Engine Team",
    author_email="team@designengine.example.com",
    url="https://github.com/design-engine/design-engine",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "design-engine=design_engine.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Markup :: HTML",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    ],
    keywords="html, css, layout, design, figma",
    project_urls={
        "Bug Reports": "https://github.com/design-engine/design-engine/issues",
        "Source": "https://github.com/design-engine/design-engine",
    },
)

#!/usr/bin/env python
"""Setup script for the pwstrength library."""
from pathlib import Path
from setuptools import setup, find_packages

# 프로젝트 루트 디렉토리
here = Path(__file__).parent.resolve()

# README 읽기
long_description = (here / "README.md").read_text(encoding="utf-8")

version = "0.1.0"

setup(
    name="pwstrength",
    version=version,
    author="YC Math",
    author_email="your-email@example.com",
    description="Password repetition-count / sequence-length metrics and permissibility check",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="password strength policy repetition sequence",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples"]),
    python_requires=">=3.8",

    # 기본 의존성
    install_requires=[
        "numpy>=1.21.0",
        "orjson>=3.8.0",
        "tqdm>=4.65.0",
    ],

    # 선택적 의존성
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "hypothesis>=6.0.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },

    # CLI 엔트리 포인트
    entry_points={
        "console_scripts": [
            "pwstrength=pwstrength.cli:main",
        ],
    },

    package_data={
        "pwstrength": ["py.typed"],  # 타입 힌트 지원
    },
    include_package_data=True,
    zip_safe=True,
)

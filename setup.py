from setuptools import setup, find_namespace_packages

setup(
    name="bookstore-catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'bookstore*', 'cli*']),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "pydantic>=2",
        "uvicorn",
        "alembic",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "bookstore=cli.main:main",
        ],
    },
)

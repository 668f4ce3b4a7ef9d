from setuptools import setup, find_namespace_packages

setup(
    name="academix_ingest",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'core*', 'api*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "beautifulsoup4",
        "requests",
        "fastapi",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest", "httpx"],
    },
    entry_points={
        "console_scripts": [
            "academix=cli.main:main",
        ],
    },
)

from setuptools import setup, find_packages

setup(
    name="well-reports-api",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic",
        "pydantic-settings",
        "duckdb",
        "httpx",
        "python-dotenv",
        "PyJWT",
        "passlib[bcrypt]",
        # passlib reads bcrypt.__about__, which newer bcrypt releases removed
        "bcrypt==4.0.1"
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio"
        ]
    },
    python_requires=">=3.9",
)

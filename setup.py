from setuptools import setup, find_packages

setup(
    name="finantic",
    version="0.1.0",
    description="Finantic landing page: animated taglines and a waitlist backend",
    packages=find_packages(include=["finantic", "finantic.*"]),
    install_requires=[
        "boto3",
        "httpx",
        "rich",
        "prompt-toolkit",
        "fastapi",
        "uvicorn",
        "cryptography",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "finantic-server=finantic.server:main",
        ],
    },
    python_requires=">=3.11",
)

from setuptools import setup, find_packages

# Packages live under backend/src; the Lambda entry point in
# backend/lambda-functions/calendar-setup imports them by package name.
found_packages = find_packages(where="backend/src")

setup(
    name="calendar-setup",
    version="0.1.0",
    packages=found_packages,
    package_dir={"": "backend/src"},
    python_requires=">=3.9",
    install_requires=[
        "boto3>=1.40.1",
        "botocore>=1.40.1",
        "pydantic>=2.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)

from pathlib import Path

from setuptools import find_namespace_packages, setup

# Load packages from requirements.txt
BASE_DIR = Path(__file__).parent
with open(Path(BASE_DIR, "requirements.txt")) as file:
    required_packages = [ln.strip() for ln in file.readlines() if ln.strip()]

test_packages = ["pytest>=7.0"]

# Define our package
setup(
    name="finlit",
    version="0.1.0",
    description="Financial literacy content, placement assessment, quiz scoring and progress tracking",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["finlit", "finlit.*"]),
    package_data={"finlit": ["data/*.json", "schemas/*.json"]},
    include_package_data=True,
    install_requires=required_packages,
    extras_require={
        "test": test_packages,
        "dev": test_packages + ["pre-commit==2.19.0"],
    },
)

from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="basehanzi",
    version="1.2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "numpy>=1.24.0",
    ],
    python_requires=">=3.11",
    author="F1xGOD",
    author_email="f1xgodim@gmail.com",
    description="Re-express base64 data as CJK ideographs drawn from a dictionary text",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)

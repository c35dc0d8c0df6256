from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "mimematch" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/mimematch/__init__.py")


setup(
    name="mimematch",
    version=_read_version(),
    description="MIME type resolution, wildcard matching and multipart formatting",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["mimematch = mimematch.cli:main"]},
)

from pathlib import Path
from setuptools import find_packages, setup


VERSION = "0.1.0"


def _load_requirements(path: str) -> list[str]:
    reqs: list[str] = []
    file_path = Path(path)
    if not file_path.exists():
        return reqs
    for line in file_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        reqs.append(line)
    return reqs


core_requirements = _load_requirements("requirements.txt")

extras_require = {
    "test": ["pytest"],
}

entry_points = {
    "console_scripts": [
        "tablehead=tablehead.cli:main",
    ],
}


setup(
    name="tablehead",
    version=VERSION,
    description="Column schema model for terminal resource listings",
    packages=find_packages(include=("tablehead", "tablehead.*"), exclude=("tablehead.tests*",)),
    include_package_data=False,
    install_requires=core_requirements,
    extras_require=extras_require,
    entry_points=entry_points,
    python_requires=">=3.10",
)

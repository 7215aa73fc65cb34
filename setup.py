from setuptools import find_packages, setup

setup(
    name="genregraph",
    version="0.1.0",
    description="3D genre/artist graph construction and spatial layout from listening-taste artist collections",
    packages=find_packages(include=["genregraph", "genregraph.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "ui": ["fastapi>=0.110", "uvicorn>=0.27"],
        "test": ["pytest>=7.4", "httpx>=0.27", "fastapi>=0.110", "uvicorn>=0.27"],
    },
    entry_points={"console_scripts": ["genregraph = genregraph.cli:main"]},
)

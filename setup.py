from setuptools import setup, find_packages

setup(
    name="raster_map",
    version="0.1.0",
    description="Dense 2D integer raster with BFS flood fill, shortest path and distance maps",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"raster_map": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "pyyaml>=6.0",
        "matplotlib>=3.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "raster_traverse=raster_map.scripts.run_traversal:main",
        ]
    },
)

"""
mentorship-engine — hierarchical mentorship and rank-progression simulation.
"""

from setuptools import setup, find_packages

setup(
    name="mentorship-engine",
    version="1.0.0",
    description="Rank-ladder mentorship simulation with apprentice assignment, "
                "qualification draws, graduation, and an assembly of representatives.",
    packages=find_packages(include=["mentorship_engine", "mentorship_engine.*"]),
    package_data={"mentorship_engine": ["scenarios/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
        ],
    },
)

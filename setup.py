"""
Setup script for venue_events_pipeline package.
"""

from setuptools import setup, find_packages

setup(
    name="venue-events-pipeline",
    version="1.0.0",
    description="Normalisation des réservations de salles 25Live en événements et tâches d'enregistrement",
    author="Glance Team",
    packages=find_packages(include=["venue_events_pipeline", "venue_events_pipeline.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.9",
)

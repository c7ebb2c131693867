# scripts/generate_sample_data.py
"""
Script to write the sample individuals/groups CSV files. Run from project root:
    python scripts/generate_sample_data.py [individuals.csv] [groups.csv]
"""
import logging
import sys

from steptracker.config.settings import settings
from steptracker.infrastructure.sample_data import generate_sample_data

def generate(individuals_csv: str, groups_csv: str):
    if generate_sample_data(individuals_csv, groups_csv, seed=settings.SAMPLE_SEED):
        print("Sample data generated")
    else:
        sys.exit(1)

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    args = sys.argv[1:]
    generate(
        args[0] if len(args) > 0 else settings.INDIVIDUALS_CSV,
        args[1] if len(args) > 1 else settings.GROUPS_CSV,
    )

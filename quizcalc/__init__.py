"""quizcalc — two small terminal utilities.

A timed quiz runner that reads question/answer pairs from a CSV file and
scores you against one overall countdown, and a four-operator calculator.

Usage:
    python -m quizcalc quiz -csv problems.csv -limit 30   # Timed quiz
    python -m quizcalc quiz --shuffle --seed 7 --review   # Reproducible order
    python -m quizcalc calc                               # Calculator
"""

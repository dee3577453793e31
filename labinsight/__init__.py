"""
LabInsight - clinical lab-pattern detection and risk scoring.
"""
__version__ = "1.0.0"

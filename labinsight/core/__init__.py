"""
LabInsight core: deterministic lab-pattern detection and risk scoring.
"""

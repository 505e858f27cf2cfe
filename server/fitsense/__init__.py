"""
FitSense API
BMI, calorie targets and AI fitness tips for the FitSense form
"""

__version__ = "1.0.0"

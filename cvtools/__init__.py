"""
Command line unit conversion tools. Converts values between units of length,
mass, volume and temperature.
"""

__version__ = "0.5"

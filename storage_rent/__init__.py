"""
Storage Rent Service
Monthly rent schedules for leased storage units
"""

__version__ = '1.0.0'

"""
Test suite for the schedule_pdf package.
"""

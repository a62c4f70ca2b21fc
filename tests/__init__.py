"""
Test suite for the office_codec project.
"""

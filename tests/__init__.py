"""
Test suite for jalaali_datepicker

Contains:
- tests/unit/          : Unit tests for individual modules
"""

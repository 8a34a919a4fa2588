"""Interfaces for flight crew workbook conversion."""

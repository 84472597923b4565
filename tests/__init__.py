"""Test suite package for resdata."""

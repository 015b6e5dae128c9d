"""Loan Decision Engine.

Loan eligibility decisions for Estonian personal identification codes.
"""

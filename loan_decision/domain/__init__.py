"""Domain layer.

Contains pure business logic without external dependencies:
- validators: Personal code validation and parsing
- business_rules: Loan policy, age policy and credit modifiers
- decision: Decision outcome value objects
"""

"""
Domain layer for the order management system.
Contains business rules, managers and the order workflow, separated from
data persistence concerns.
"""

"""
Service layer.

Services encapsulate data access for a domain and are constructed
with the store handle opened at start-up.
"""

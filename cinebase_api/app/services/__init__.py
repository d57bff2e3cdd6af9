"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive the ``Store`` explicitly so handlers stay thin and tests can
work against a fresh store.
"""

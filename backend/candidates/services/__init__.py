"""
Business logic services package.

WHY: Services contain business logic separated from API routes and data access,
following the three-layer architecture (API → Service → DAO). The lookup
clients for the Party and Election services live here too.
"""

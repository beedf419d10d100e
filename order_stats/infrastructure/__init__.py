"""
Infrastructure Layer - External System Adapters

Structure:
- adapters/persistence/: Order repository adapters (SQLAlchemy, in-memory)
- adapters/publishing/: Report publisher adapters (logging)
- monitoring/: Prometheus metrics
"""

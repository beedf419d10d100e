"""
Application Layer - Worker and Ports

This module drives the periodic statistics cycle and talks to the outside
world only through ports (interfaces).

Structure:
- ports/outbound/: Order repository and report publisher interfaces
- services/: Report formatter and the periodic statistics worker
"""

"""
Pet Plan Billing - Billing & Renewal Engine

A FastAPI-based service and batch tooling for pet health plan contracts:
billing cadence enforcement, anchored renewal dates, regularization of
overdue contracts and installment schedule repair.
"""

__version__ = "0.1.0"

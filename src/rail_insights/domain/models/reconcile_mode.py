"""Reconciliation mode domain model."""

from enum import Enum


class ReconcileMode(str, Enum):
    """Which identity a batch of trips is deduplicated by.

    SINGLE: one fahrt number per batch, identity is (fahrt number, stop).
    MULTI: several lines per batch, identity is (fahrt number, planned time).
    """

    SINGLE = "single"
    MULTI = "multi"

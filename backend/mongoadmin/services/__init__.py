"""
Service layer for aggregation and mutations.
"""
from mongoadmin.services.aggregator import ALL_DATABASES, AggregateResult, Aggregator
from mongoadmin.services.mutations import MutationGateway, evaluate_drop
from mongoadmin.services.stats import fetch_stats

__all__ = [
    "ALL_DATABASES",
    "AggregateResult",
    "Aggregator",
    "MutationGateway",
    "evaluate_drop",
    "fetch_stats",
]

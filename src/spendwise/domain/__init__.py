"""Domain layer for spendwise application."""

# Services are imported lazily; database.base imports domain.entities,
# and eager imports here would cycle back into the database package.
_SERVICES = {
    "AggregationService": "spendwise.domain.aggregation",
    "AlertService": "spendwise.domain.alerts",
    "AnalyticsService": "spendwise.domain.analytics",
    "BudgetService": "spendwise.domain.budget",
    "DashboardService": "spendwise.domain.dashboard",
    "TransactionService": "spendwise.domain.transaction",
    "TrendService": "spendwise.domain.trend",
    "UserService": "spendwise.domain.user",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

"""Employee Portal package.

Feature modules (accounts, leaves, tasks, attendance, ...) each carry a model,
a repository interface with its MySQL implementation, a service and a thin
Flask controller. The ``auth`` module holds the per-portal session model.
"""

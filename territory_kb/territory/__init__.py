"""Territory Knowledge Base query layer.

Localized territory names, cross-locale translation, containment queries
and attribute records over a dataset built once at startup.

Read-only after construction -- no I/O, no locking on queries.
"""

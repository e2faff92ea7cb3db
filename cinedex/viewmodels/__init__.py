"""ViewModel package for UI state and command surfaces.

Call context:
    ``cinedex/app`` controllers import concrete viewmodels from this package
    and bind view callbacks to their state transitions.

Dependencies:
    Modules in this package depend on domain types and formatting helpers
    only. Persistence and catalog access stay in use cases and adapters.
"""

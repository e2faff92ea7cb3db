"""Use-case layer for catalog loading, search, edits, ratings and watchlist workflows.

Each module coordinates domain objects and ports and maps failures to
``UseCaseError`` so the app layer can present them uniformly.
"""

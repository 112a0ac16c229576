"""Site attendance package.

Organized by feature modules (auth, workers, projects, attendance, backup)
with a thin Flask controller layer over service/repository layers that talk
to a hierarchical document store.
"""

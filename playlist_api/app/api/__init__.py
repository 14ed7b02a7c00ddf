"""
API package containing the HTTP routes.

The top‑level ``router`` in ``router.py`` aggregates the
domain‑specific routers defined in ``endpoints`` and is mounted by
``main.create_app`` under the ``/api`` prefix.
"""

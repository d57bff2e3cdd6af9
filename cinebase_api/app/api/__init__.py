"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and is mounted under the
``/api`` prefix by ``create_app``.
"""

# kudos_wall/__init__.py

# kudos_wall/adapters/__init__.py

# kudos_wall/adapters/configuration/__init__.py

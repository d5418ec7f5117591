# kudos_wall/shared/__init__.py

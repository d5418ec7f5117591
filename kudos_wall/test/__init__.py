# kudos_wall/test/__init__.py

# kudos_wall/application/ports/__init__.py

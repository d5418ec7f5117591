# kudos_wall/application/__init__.py

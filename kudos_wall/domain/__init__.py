# kudos_wall/domain/__init__.py

# kudos_wall/domain/models/__init__.py

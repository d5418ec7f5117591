# kudos_wall/domain/services/__init__.py

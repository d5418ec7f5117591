# kudos_wall/shared/utils/__init__.py

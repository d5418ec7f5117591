# kudos_wall/application/dtos/__init__.py

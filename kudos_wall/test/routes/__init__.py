# kudos_wall/test/routes/__init__.py

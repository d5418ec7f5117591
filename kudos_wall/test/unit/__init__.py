# kudos_wall/test/unit/__init__.py

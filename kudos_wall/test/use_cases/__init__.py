# kudos_wall/test/use_cases/__init__.py

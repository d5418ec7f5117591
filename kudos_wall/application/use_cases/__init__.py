# kudos_wall/application/use_cases/__init__.py

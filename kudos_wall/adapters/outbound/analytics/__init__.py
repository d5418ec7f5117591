# kudos_wall/adapters/outbound/analytics/__init__.py

# kudos_wall/adapters/outbound/security/__init__.py

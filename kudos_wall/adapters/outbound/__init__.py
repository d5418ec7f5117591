# kudos_wall/adapters/outbound/__init__.py

# kudos_wall/adapters/inbound/__init__.py

# kudos_wall/adapters/inbound/api/__init__.py

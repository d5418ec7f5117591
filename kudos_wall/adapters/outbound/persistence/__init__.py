# kudos_wall/adapters/outbound/persistence/__init__.py

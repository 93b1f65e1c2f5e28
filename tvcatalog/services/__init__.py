"""
Application services layer (use cases).

Services own the in-memory catalog and orchestrate its construction.

This layer contains:
- Tag allocation
- Channel group and channel registries
- Transport linking and global transport registration
- Backend configurator registry
- Bootstrap from configuration entries

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""

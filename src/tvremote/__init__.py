"""tvremote -- remote control for networked TVs with a local JSON/HTTP API.

The package contains an asyncio client that pairs with the TV and sends
key presses and app launches over one of three transport modes, and a
small relay server that forwards same-origin requests to the TV.
"""

__version__ = "0.1.0"

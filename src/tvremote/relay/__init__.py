"""Relay server module for tvremote.

A stateless same-origin forwarder: requests under ``/api`` are sent on to
the TV named in the ``X-TV-IP``/``X-TV-PORT`` headers, and every other
path is served from a static root.
"""

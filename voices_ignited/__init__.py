"""
Project package for the Voices Ignited website backend.

Holds the settings modules, the root URL configuration and the ASGI/WSGI
entry points.
"""

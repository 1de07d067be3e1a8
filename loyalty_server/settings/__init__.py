"""
Settings package for loyalty_server.

Select a module through DJANGO_SETTINGS_MODULE, e.g.
loyalty_server.settings.development or loyalty_server.settings.test.
"""

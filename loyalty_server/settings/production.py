"""
Production settings for loyalty_server project.
"""

from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

# Security settings
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# Session security
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
CSRF_COOKIE_HTTPONLY = True

# CORS settings for production
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = config('CORS_ALLOWED_ORIGINS', cast=Csv())

# File logging for production
LOGS_DIR.mkdir(exist_ok=True)
LOGGING['handlers']['file'] = {
    'level': 'WARNING',
    'class': 'logging.FileHandler',
    'filename': LOGS_DIR / 'loyalty.log',
    'formatter': 'verbose',
}
LOGGING['handlers']['audit_file'] = {
    'level': 'INFO',
    'class': 'logging.FileHandler',
    'filename': LOGS_DIR / 'audit.log',
    'formatter': 'audit',
}
LOGGING['root']['handlers'] = ['console', 'file']
LOGGING['root']['level'] = 'WARNING'
LOGGING['loggers']['loyalty.audit']['handlers'] = ['audit_file']

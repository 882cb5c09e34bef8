# config/settings/test.py

from .base import *

# === TESTES ===

DEBUG = False

SECRET_KEY = 'ludus-test-secret-key'

ALLOWED_HOSTS = ['testserver', 'localhost']

# Banco em memória
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Sem Redis nos testes
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'ludus-test-cache',
    }
}

# Hash rápido para acelerar os testes
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.InMemoryStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

# Somente console, sem arquivo de log
LOGGING['root']['handlers'] = ['console']
LOGGING['loggers']['django']['handlers'] = ['console']
LOGGING['loggers']['apps']['handlers'] = ['console']
LOGGING['handlers'].pop('file')
LOGGING['handlers']['console']['level'] = 'WARNING'

LUDUS_ADMIN_EMAIL = 'admin@ludus.test'
LUDUS_ADMIN_PASSWORD = 'admin-senha'
LUDUS_ADMIN_SEED_TOKEN = 'token-de-teste'

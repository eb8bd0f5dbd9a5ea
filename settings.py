# Server settings. Every value can be overridden from the environment.
import os

HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '3000'))

# Directory served as the document root; '/' returns its index.html.
SITE_ROOT = os.getenv('SITE_ROOT', 'flipbook-v2')

# Bottle server adapter, e.g. 'wsgiref' or 'paste'.
SERVER = os.getenv('SERVER', 'wsgiref')

DEBUG_APP = os.getenv('DEBUG_APP', 'false').lower() in ('1', 'true', 'yes')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

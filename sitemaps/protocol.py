'''
Constants from the Sitemaps protocol (https://www.sitemaps.org/protocol.html).
'''

NAMESPACE = 'http://www.sitemaps.org/schemas/sitemap/0.9'
SCHEMA_INSTANCE = 'http://www.w3.org/2001/XMLSchema-instance'

# Limits on the contents of a single document.
MAX_URL_LENGTH = 2048
MAX_ENTRIES = 50_000
MAX_DOCUMENT_BYTES = 50 * 1024 * 1024

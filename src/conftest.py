"""Test environment defaults.

api.security refuses to import without a signing key.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")

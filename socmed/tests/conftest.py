from __future__ import annotations

import os
import tempfile

# Configuration is read once at import time, so point it at scratch storage
# before any socmed module is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="socmed-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "app.log"))
os.environ.setdefault("TOKEN_SECRET", "test-secret-key-for-unit-tests-1234567890")
os.environ.setdefault("TOKEN_TTL_SECONDS", "3600")
os.environ.setdefault("APP_ENV", "test")

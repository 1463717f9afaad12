"""공용 유틸리티 (Shared helpers: password hashing, CSV reading, exceptions)."""

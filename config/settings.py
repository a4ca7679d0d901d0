class Settings:
    """Centralised application configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "ChunkCipher"
    APP_VERSION = "0.5.0"

    # ── cipher defaults ──────────────────────────────────────────
    DEFAULT_CIPHER = "caesar"
    DEFAULT_KEY    = ""

    # ── execution engine ─────────────────────────────────────────
    DEFAULT_WORKERS    = 4
    HEARTBEAT_INTERVAL = 1.0     # seconds
    THREAD_NAME_PREFIX = "ChunkCipher-worker"

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL       = "WARNING"
    LOG_FORMAT      = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATE_FORMAT = "%H:%M:%S"

import logging
import os
from pathlib import Path

# ==========================
# CONFIG GERAL
# ==========================

APPLICATION_NAME = "loterias-dashboard"

BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:8081").rstrip("/")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

PROMETHEUS_PUSHGATEWAY_URL = os.getenv("PROMETHEUS_PUSHGATEWAY_URL", "http://localhost:9091").rstrip("/")
METRICS_FLUSH_SECONDS = float(os.getenv("METRICS_FLUSH_SECONDS", "15"))
METRICS_ENABLED = os.getenv("METRICS_ENABLED", "0") == "1"

DATA_DIR = Path(os.getenv("DATA_DIR", "data"))
HISTORICO_PATH = DATA_DIR / "historico_jogos.json"

# Tempo de espera entre sincronizações com a Caixa
SYNC_COOLDOWN_SECONDS = int(os.getenv("SYNC_COOLDOWN_SECONDS", "120"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configurar_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

import logging
import threading
import time
from dataclasses import dataclass, field

import requests

from config import APPLICATION_NAME, METRICS_FLUSH_SECONDS, PROMETHEUS_PUSHGATEWAY_URL

logger = logging.getLogger(__name__)

MAX_BUFFER = 1000
MAX_FALHAS_CONSECUTIVAS = 5
PUSH_TIMEOUT = 5


@dataclass
class Metrica:
    nome: str
    valor: float
    labels: dict[str, str] = field(default_factory=dict)
    timestamp: int = 0


def _escapar_label(valor: str) -> str:
    return valor.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def formatar_prometheus(metricas: list[Metrica]) -> str:
    linhas = []
    for m in metricas:
        labels = ""
        if m.labels:
            labels = "{" + ",".join(f'{k}="{_escapar_label(str(v))}"' for k, v in m.labels.items()) + "}"
        linhas.append(f"{m.nome}{labels} {m.valor} {m.timestamp}")
    return "\n".join(linhas)


class MetricsCollector:
    """
    Coletor de métricas com push periódico para o Prometheus Pushgateway.

    Não é singleton: crie uma instância, chame `init()` para iniciar o
    envio em segundo plano e `shutdown()` no encerramento (faz o último
    flush). Com `enabled=False` nada é registrado.
    """

    def __init__(
        self,
        pushgateway_url: str = PROMETHEUS_PUSHGATEWAY_URL,
        flush_seconds: float = METRICS_FLUSH_SECONDS,
        application: str = APPLICATION_NAME,
        enabled: bool = True,
        session: requests.Session | None = None,
    ):
        self.pushgateway_url = pushgateway_url.rstrip("/")
        self.flush_seconds = flush_seconds
        self.application = application
        self.enabled = enabled
        self.session = session or requests.Session()
        self.falhas_consecutivas = 0
        self._buffer: list[Metrica] = []
        self._lock = threading.Lock()
        self._parar = threading.Event()
        self._thread: threading.Thread | None = None

    # ---------- ciclo de vida ----------

    def init(self) -> None:
        if not self.enabled or self._thread is not None:
            return
        self._parar.clear()
        self._thread = threading.Thread(target=self._loop, name="metrics-flush", daemon=True)
        self._thread.start()
        logger.info(f"[METRICS] push para {self.pushgateway_url} a cada {self.flush_seconds}s")

    def shutdown(self) -> None:
        self._parar.set()
        if self._thread is not None:
            self._thread.join(timeout=self.flush_seconds)
            self._thread = None
        self.flush()

    def _loop(self) -> None:
        while not self._parar.wait(self.flush_seconds):
            self.flush()

    # ---------- registro ----------

    def record(self, nome: str, valor: float, labels: dict[str, str] | None = None) -> None:
        if not self.enabled:
            return
        metrica = Metrica(
            nome=nome,
            valor=valor,
            labels={**(labels or {}), "application": self.application},
            timestamp=int(time.time() * 1000),
        )
        with self._lock:
            if len(self._buffer) >= MAX_BUFFER:
                # descarta o quarto mais antigo
                del self._buffer[: MAX_BUFFER // 4]
            self._buffer.append(metrica)

    def increment(self, nome: str, labels: dict[str, str] | None = None) -> None:
        self.record(nome, 1, labels)

    def timing(self, nome: str, duracao_ms: float, labels: dict[str, str] | None = None) -> None:
        self.record(f"{nome}_duration_ms", duracao_ms, labels)

    def pendentes(self) -> list[Metrica]:
        with self._lock:
            return list(self._buffer)

    # ---------- envio ----------

    def flush(self) -> None:
        with self._lock:
            if not self._buffer:
                return
            enviar = self._buffer
            self._buffer = []

        url = f"{self.pushgateway_url}/metrics/job/{self.application}"
        try:
            resp = self.session.post(
                url,
                data=formatar_prometheus(enviar),
                headers={"Content-Type": "text/plain"},
                timeout=PUSH_TIMEOUT,
            )
            resp.raise_for_status()
            self.falhas_consecutivas = 0
        except requests.RequestException as e:
            self.falhas_consecutivas += 1
            if self.falhas_consecutivas < MAX_FALHAS_CONSECUTIVAS:
                requeue = enviar[-(MAX_BUFFER // 2):]
                with self._lock:
                    self._buffer[:0] = requeue
                    # o que chegou durante o push tem prioridade sobre o requeue
                    del self._buffer[: max(0, len(self._buffer) - MAX_BUFFER)]
            logger.error(f"[METRICS] falha no push ({self.falhas_consecutivas} seguidas): {e}")

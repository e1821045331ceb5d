import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any, Callable

import requests

from backend.metrics import MetricsCollector
from config import API_TIMEOUT_SECONDS, BACKEND_URL

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = {502, 503, 429}
MAX_RETRIES = 2
BACKOFF_SECONDS = 1.0
INTERVALO_SINAL = 0.05
MAX_REQUISICOES_SIMULTANEAS = 8


class ApiError(Exception):
    def __init__(self, status: int, endpoint: str, message: str | None = None):
        self.status = status
        self.endpoint = endpoint
        super().__init__(message or f"API error: {status} on {endpoint}")


class RequisicaoCancelada(Exception):
    """Timeout ou cancelamento explícito. Não é erro da aplicação."""

    def __init__(self, endpoint: str, motivo: str):
        self.endpoint = endpoint
        self.motivo = motivo
        super().__init__(f"{endpoint}: {motivo}")


class SinalCancelamento:
    def __init__(self) -> None:
        self._evento = threading.Event()

    def cancelar(self) -> None:
        self._evento.set()

    @property
    def cancelado(self) -> bool:
        return self._evento.is_set()

    def aguardar(self, segundos: float) -> bool:
        """Espera até `segundos`; devolve True se foi cancelado no meio."""
        return self._evento.wait(segundos)


class ControladorCarga:
    """
    Cancela-e-recarrega por painel: cada nova carga cancela a anterior, e
    só o resultado do sinal mais recente pode ser confirmado no estado.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._atual: SinalCancelamento | None = None
        self.valor: Any = None

    def novo_sinal(self) -> SinalCancelamento:
        with self._lock:
            if self._atual is not None:
                self._atual.cancelar()
            self._atual = SinalCancelamento()
            return self._atual

    def cancelar(self) -> None:
        with self._lock:
            if self._atual is not None:
                self._atual.cancelar()

    def confirmar(self, sinal: SinalCancelamento, valor: Any) -> bool:
        with self._lock:
            if sinal is not self._atual or sinal.cancelado:
                return False
            self.valor = valor
            return True


class CargasPorVisao:
    """
    Controladores de carga da visão atual (página + loteria). Trocar de
    visão cancela tudo o que a anterior ainda estava carregando.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._controladores: dict[str, ControladorCarga] = {}
        self.visao: Any = None

    def controlador(self, painel: str) -> ControladorCarga:
        with self._lock:
            return self._controladores.setdefault(painel, ControladorCarga())

    def trocar_visao(self, visao: Any) -> bool:
        with self._lock:
            if visao == self.visao:
                return False
            for ctrl in self._controladores.values():
                ctrl.cancelar()
            self.visao = visao
            return True

    def carregar(self, painel: str, funcao: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Chama `funcao(..., sinal=...)` e só devolve o valor se a carga não foi substituída."""
        ctrl = self.controlador(painel)
        sinal = ctrl.novo_sinal()
        valor = funcao(*args, sinal=sinal, **kwargs)
        if not ctrl.confirmar(sinal, valor):
            raise RequisicaoCancelada(painel, "substituída por carga mais recente")
        return valor


@dataclass
class GerarJogoRequest:
    quantidade_numeros: int | None = None
    quantidade_jogos: int | None = None
    usar_numeros_quentes: bool | None = None
    usar_numeros_frios: bool | None = None
    usar_numeros_atrasados: bool | None = None
    balancear_pares_impares: bool | None = None
    evitar_sequenciais: bool | None = None
    numeros_obrigatorios: list[int] = field(default_factory=list)
    numeros_excluidos: list[int] = field(default_factory=list)
    sugerir_time: str | None = None
    sugerir_mes: str | None = None
    quantidade_trevos: int | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        inteiros = {
            "quantidadeNumeros": self.quantidade_numeros,
            "quantidadeJogos": self.quantidade_jogos,
            "quantidadeTrevos": self.quantidade_trevos,
        }
        for nome, valor in inteiros.items():
            if valor:
                params[nome] = str(valor)

        flags = {
            "usarNumerosQuentes": self.usar_numeros_quentes,
            "usarNumerosFrios": self.usar_numeros_frios,
            "usarNumerosAtrasados": self.usar_numeros_atrasados,
            "balancearParesImpares": self.balancear_pares_impares,
            "evitarSequenciais": self.evitar_sequenciais,
        }
        for nome, valor in flags.items():
            if valor is not None:
                params[nome] = _bool(valor)

        if self.numeros_obrigatorios:
            params["numerosObrigatorios"] = ",".join(map(str, self.numeros_obrigatorios))
        if self.numeros_excluidos:
            params["numerosExcluidos"] = ",".join(map(str, self.numeros_excluidos))
        if self.sugerir_time:
            params["sugerirTime"] = self.sugerir_time
        if self.sugerir_mes:
            params["sugerirMes"] = self.sugerir_mes
        return params


def _bool(valor: bool) -> str:
    return "true" if valor else "false"


def _valor(tipo: Any) -> str:
    return str(getattr(tipo, "value", tipo))


def _fechar(resp: Any) -> None:
    fechar = getattr(resp, "close", None)
    if fechar is not None:
        fechar()


def _fechar_se_concluida(futuro: Future) -> None:
    if not futuro.cancelled() and futuro.exception() is None:
        _fechar(futuro.result())


def _abandonar(futuro: Future) -> None:
    # a thread segue até o requests desistir; a resposta tardia só é fechada
    if not futuro.cancel():
        futuro.add_done_callback(_fechar_se_concluida)


class ApiClient:
    """
    Cliente do backend de loterias.

    GETs têm até 2 novas tentativas em 502/503/429 com espera linear
    (1s, 2s). POSTs nunca são repetidos. Todo o ciclo de uma chamada,
    tentativas e esperas incluídas, respeita `timeout`; o sinal do
    chamador encerra a chamada a qualquer momento. Cada requisição corre
    numa thread do pool, então prazo e sinal valem mesmo com ela em voo.
    """

    def __init__(
        self,
        base_url: str = BACKEND_URL,
        session: requests.Session | None = None,
        metrics: MetricsCollector | None = None,
        timeout: float = API_TIMEOUT_SECONDS,
        dormir: Callable[[float, SinalCancelamento | None], None] | None = None,
        relogio: Callable[[], float] = time.monotonic,
        executor: ThreadPoolExecutor | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.metrics = metrics or MetricsCollector(enabled=False)
        self.timeout = timeout
        self._dormir = dormir or self._esperar
        self._relogio = relogio
        self._executor = executor or ThreadPoolExecutor(
            max_workers=MAX_REQUISICOES_SIMULTANEAS, thread_name_prefix="api"
        )

    # ---------- núcleo ----------

    def _esperar(self, segundos: float, sinal: SinalCancelamento | None) -> None:
        # cancelamento interrompe a espera; a próxima tentativa detecta o sinal
        if sinal is None:
            time.sleep(segundos)
        else:
            sinal.aguardar(segundos)

    def _medir(self, endpoint: str, metodo: str, status: int, duracao_ms: float) -> None:
        labels = {"endpoint": endpoint, "method": metodo, "status": str(status)}
        try:
            self.metrics.timing("api_request", duracao_ms, labels)
            self.metrics.increment("api_requests_total", labels)
        except Exception as e:
            logger.debug(f"[API] falha registrando métricas: {e}")

    def _registrar_erro(self, endpoint: str, metodo: str) -> None:
        try:
            self.metrics.increment("api_requests_errors", {"endpoint": endpoint, "method": metodo})
        except Exception as e:
            logger.debug(f"[API] falha registrando métricas: {e}")

    def _enviar(
        self,
        metodo: str,
        endpoint: str,
        sinal: SinalCancelamento | None,
        prazo: float,
        **kwargs: Any,
    ) -> requests.Response:
        if sinal is not None and sinal.cancelado:
            raise RequisicaoCancelada(endpoint, "abortada pelo chamador")
        restante = prazo - self._relogio()
        if restante <= 0:
            raise RequisicaoCancelada(endpoint, "timeout")

        inicio = time.perf_counter()
        futuro = self._executor.submit(
            self.session.request,
            metodo,
            f"{self.base_url}{endpoint}",
            timeout=restante,
            headers={"Cache-Control": "no-store"},
            **kwargs,
        )
        motivo = self._aguardar_resposta(futuro, sinal, restante)
        if motivo is not None:
            _abandonar(futuro)
            logger.info(f"[API] {metodo} {endpoint} interrompida: {motivo}")
            raise RequisicaoCancelada(endpoint, motivo)

        try:
            resp = futuro.result()
        except requests.Timeout:
            logger.info(f"[API] {metodo} {endpoint} excedeu {self.timeout}s")
            raise RequisicaoCancelada(endpoint, "timeout") from None
        except requests.RequestException as e:
            duracao_ms = (time.perf_counter() - inicio) * 1000
            self._registrar_erro(endpoint, metodo)
            logger.error(f"[API] {metodo} {endpoint} erro de rede após {duracao_ms:.0f}ms: {e}")
            raise ApiError(0, endpoint, str(e)) from e

        duracao_ms = (time.perf_counter() - inicio) * 1000
        self._medir(endpoint, metodo, resp.status_code, duracao_ms)

        # resposta chegou junto com o cancelamento: descarta
        if sinal is not None and sinal.cancelado:
            _fechar(resp)
            raise RequisicaoCancelada(endpoint, "abortada pelo chamador")
        logger.debug(f"[API] {metodo} {endpoint} -> {resp.status_code} em {duracao_ms:.0f}ms")
        return resp

    def _aguardar_resposta(
        self,
        futuro: Future,
        sinal: SinalCancelamento | None,
        restante: float,
    ) -> str | None:
        """
        Espera a requisição terminar, o chamador cancelar ou o prazo acabar,
        o que vier primeiro. Devolve o motivo da interrupção, ou None se a
        requisição terminou.
        """
        limite = time.monotonic() + restante
        while True:
            if sinal is not None and sinal.cancelado:
                return "abortada pelo chamador"
            falta = limite - time.monotonic()
            if falta <= 0:
                return "timeout"
            feitos, _ = wait([futuro], timeout=min(falta, INTERVALO_SINAL))
            if feitos:
                return None

    def _json(self, resp: requests.Response, endpoint: str, metodo: str) -> Any:
        content_type = resp.headers.get("content-type", "")
        if "application/json" not in content_type:
            self._registrar_erro(endpoint, metodo)
            logger.error(f"[API] {metodo} {endpoint}: content-type inesperado {content_type!r}")
            raise ApiError(resp.status_code, endpoint, "Unexpected response content-type")
        try:
            return resp.json()
        except ValueError as e:
            self._registrar_erro(endpoint, metodo)
            raise ApiError(resp.status_code, endpoint, f"JSON inválido: {e}") from e

    def fetch_api(
        self,
        endpoint: str,
        sinal: SinalCancelamento | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        prazo = self._relogio() + self.timeout

        for tentativa in range(MAX_RETRIES + 1):
            if tentativa > 0:
                espera = min(tentativa * BACKOFF_SECONDS, max(0.0, prazo - self._relogio()))
                self._dormir(espera, sinal)

            resp = self._enviar("GET", endpoint, sinal, prazo, params=params)
            if resp.ok:
                return self._json(resp, endpoint, "GET")

            if tentativa < MAX_RETRIES and resp.status_code in RETRYABLE_STATUSES:
                logger.warning(
                    f"[API] GET {endpoint} -> {resp.status_code}, nova tentativa ({tentativa + 1}/{MAX_RETRIES})"
                )
                continue

            self._registrar_erro(endpoint, "GET")
            logger.error(f"[API] GET {endpoint} falhou com status {resp.status_code}")
            raise ApiError(resp.status_code, endpoint)

    def post_api(
        self,
        endpoint: str,
        sinal: SinalCancelamento | None = None,
        json: Any = None,
    ) -> Any:
        prazo = self._relogio() + self.timeout
        resp = self._enviar("POST", endpoint, sinal, prazo, json=json)
        if not resp.ok:
            self._registrar_erro(endpoint, "POST")
            logger.error(f"[API] POST {endpoint} falhou com status {resp.status_code}")
            raise ApiError(resp.status_code, endpoint)
        return self._json(resp, endpoint, "POST")

    # ---------- endpoints ----------

    def get_dashboard(self, tipo, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api(f"/api/dashboard/{_valor(tipo)}", sinal)

    def get_ranking_numeros(self, tipo, sinal: SinalCancelamento | None = None) -> list:
        return self.fetch_api(f"/api/dashboard/{_valor(tipo)}/numeros/ranking", sinal)

    def get_estrategias(self, sinal: SinalCancelamento | None = None) -> list:
        return self.fetch_api("/api/estatisticas/estrategias", sinal)

    def gerar_jogos_estrategico(
        self,
        tipo,
        estrategia: str,
        quantidade: int,
        quantidade_numeros: int | None = None,
        debug: bool = False,
        quantidade_trevos: int | None = None,
    ) -> dict:
        params = {"estrategia": estrategia, "quantidade": str(quantidade)}
        if quantidade_numeros:
            params["quantidadeNumeros"] = str(quantidade_numeros)
        if quantidade_trevos:
            params["quantidadeTrevos"] = str(quantidade_trevos)
        params["debug"] = _bool(debug)
        return self.fetch_api(f"/api/estatisticas/{_valor(tipo)}/gerar-jogos-estrategico", params=params)

    def gerar_jogos_personalizado(self, tipo, request: GerarJogoRequest, debug: bool = False) -> dict:
        params = request.to_params()
        params["debug"] = _bool(debug)
        return self.fetch_api(f"/api/estatisticas/{_valor(tipo)}/gerar-jogos", params=params)

    def conferir_aposta(self, tipo, numeros: list[int]) -> dict:
        return self.fetch_api(
            f"/api/dashboard/{_valor(tipo)}/conferir",
            params={"numeros": ",".join(map(str, numeros))},
        )

    def sync_loteria(self, tipo) -> dict:
        return self.post_api(f"/api/concursos/{_valor(tipo)}/sync-ultimo")

    def sync_todas_loterias(self) -> dict:
        return self.post_api("/api/concursos/sync-ultimos")

    def get_sync_status(self) -> dict:
        return self.fetch_api("/api/concursos/sync-status")

    def get_especiais(self, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api("/api/dashboard/especiais", sinal)

    def get_ordem_sorteio(self, tipo, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api(f"/api/analise/{_valor(tipo)}/ordem-sorteio", sinal)

    def get_financeiro(
        self,
        tipo,
        data_inicio: str | None = None,
        data_fim: str | None = None,
        sinal: SinalCancelamento | None = None,
    ) -> dict:
        params = {}
        if data_inicio:
            params["dataInicio"] = data_inicio
        if data_fim:
            params["dataFim"] = data_fim
        return self.fetch_api(f"/api/analise/{_valor(tipo)}/financeiro", sinal, params=params or None)

    def get_acumulado(self, tipo, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api(f"/api/dashboard/{_valor(tipo)}/acumulado", sinal)

    def get_dupla_sena(self, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api("/api/analise/dupla-sena", sinal)

    def get_time_coracao(self, tipo, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api(f"/api/analise/{_valor(tipo)}/time-coracao", sinal)

    def get_tendencias(self, tipo, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api(f"/api/analise/{_valor(tipo)}/tendencias", sinal)

    def get_historico_mensal(self, tipo, sinal: SinalCancelamento | None = None) -> list:
        return self.fetch_api(f"/api/analise/{_valor(tipo)}/historico-mensal", sinal)

    def get_ganhadores_por_uf(self, tipo, sinal: SinalCancelamento | None = None) -> dict:
        return self.fetch_api(f"/api/dashboard/{_valor(tipo)}/ganhadores-por-uf", sinal)

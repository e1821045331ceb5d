import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Any

from backend.client import ApiClient, GerarJogoRequest
from utils.storage import HistoricoJogos, registro_de_resposta

logger = logging.getLogger(__name__)

MODO_ESTRATEGICO = "estrategico"
MODO_PERSONALIZADO = "personalizado"


@dataclass
class ResultadoGeracaoMultipla:
    sucessos: list[tuple[Any, dict]] = field(default_factory=list)
    falhas: int = 0


def _gerar_uma(
    cliente: ApiClient,
    tipo,
    modo: str,
    estrategia: str,
    quantidade: int,
    request: GerarJogoRequest | None,
    debug: bool,
) -> dict:
    if modo == MODO_ESTRATEGICO:
        return cliente.gerar_jogos_estrategico(tipo, estrategia, quantidade, debug=debug)
    req = request or GerarJogoRequest()
    req.quantidade_jogos = quantidade
    return cliente.gerar_jogos_personalizado(tipo, req, debug=debug)


def gerar_para_loterias(
    cliente: ApiClient,
    tipos: list,
    modo: str = MODO_ESTRATEGICO,
    estrategia: str = "",
    quantidade: int = 1,
    request: GerarJogoRequest | None = None,
    debug: bool = False,
    historico: HistoricoJogos | None = None,
    max_workers: int = 4,
) -> ResultadoGeracaoMultipla:
    """
    Gera jogos para várias loterias em paralelo.

    A falha de uma loteria não interrompe as outras: ela só é contada e
    logada. Cada sucesso vai para o histórico, se informado.
    """
    resultado = ResultadoGeracaoMultipla()
    if not tipos:
        return resultado

    with ThreadPoolExecutor(max_workers=min(max_workers, len(tipos))) as pool:
        futuros = [
            (
                tipo,
                pool.submit(
                    _gerar_uma, cliente, tipo, modo, estrategia, quantidade,
                    replace(request) if request else None, debug,
                ),
            )
            for tipo in tipos
        ]

        for tipo, futuro in futuros:
            try:
                resposta = futuro.result()
            except Exception as e:
                resultado.falhas += 1
                logger.debug(f"[GERACAO] {tipo}: {e}")
                continue
            resultado.sucessos.append((tipo, resposta))

    if resultado.falhas:
        logger.warning(f"[GERACAO] {resultado.falhas} de {len(tipos)} loterias falharam")

    if historico is not None:
        for tipo, resposta in resultado.sucessos:
            historico.salvar(registro_de_resposta(tipo, resposta))

    return resultado

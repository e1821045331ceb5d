import logging
from dataclasses import dataclass
from typing import Any, Callable

from backend.client import RequisicaoCancelada

logger = logging.getLogger(__name__)


@dataclass
class ResultadoPainel:
    nome: str
    ok: bool
    valor: Any = None
    erro: BaseException | None = None
    cancelado: bool = False


def executar_isolado(
    nome: str,
    funcao: Callable[..., Any],
    *args: Any,
    ao_falhar: Callable[[ResultadoPainel], Any] | None = None,
    **kwargs: Any,
) -> ResultadoPainel:
    """
    Executa uma unidade de trabalho (um painel) sem deixar a falha
    derrubar os demais. O erro fica no resultado e vai para o log;
    `ao_falhar` recebe o resultado para renderizar o fallback.
    """
    try:
        return ResultadoPainel(nome=nome, ok=True, valor=funcao(*args, **kwargs))
    except RequisicaoCancelada as e:
        logger.debug(f"[PAINEL] {nome}: requisição cancelada ({e})")
        resultado = ResultadoPainel(nome=nome, ok=False, erro=e, cancelado=True)
    except Exception as e:
        logger.exception(f"[PAINEL] {nome}: erro ao renderizar")
        resultado = ResultadoPainel(nome=nome, ok=False, erro=e)

    if ao_falhar is not None:
        ao_falhar(resultado)
    return resultado

from dataclasses import dataclass

from analysis.loterias import TipoLoteria, obter_config
from analysis.probability import combinacoes


@dataclass
class PrecoBase:
    preco: float
    combinatorio: bool = True


# Valores de exemplo; confira com a tabela oficial mais recente.
TABELA_PRECOS: dict[TipoLoteria, PrecoBase] = {
    TipoLoteria.MEGA_SENA: PrecoBase(6.00),
    TipoLoteria.LOTOFACIL: PrecoBase(3.50),
    TipoLoteria.QUINA: PrecoBase(3.00),
    TipoLoteria.LOTOMANIA: PrecoBase(3.00, combinatorio=False),
    TipoLoteria.TIMEMANIA: PrecoBase(3.50, combinatorio=False),
    TipoLoteria.DUPLA_SENA: PrecoBase(3.00),
    TipoLoteria.DIA_DE_SORTE: PrecoBase(2.50),
    TipoLoteria.SUPER_SETE: PrecoBase(3.00),
    TipoLoteria.MAIS_MILIONARIA: PrecoBase(6.00),
}


def preco_aposta(tipo: TipoLoteria | str, qtd_dezenas: int) -> float | None:
    """
    Preço de uma aposta com `qtd_dezenas`: C(qtd, mínimo) apostas simples.

    Super Sete tem tabela própria por coluna, então devolve None.
    """
    config = obter_config(tipo)
    if config.tipo == TipoLoteria.SUPER_SETE:
        return None
    if not (config.min <= qtd_dezenas <= config.max):
        raise ValueError(
            f"{config.label}: quantidade de dezenas deve estar entre {config.min} e {config.max}."
        )
    base = TABELA_PRECOS[config.tipo]
    if not base.combinatorio:
        return base.preco
    return combinacoes(qtd_dezenas, config.min) * base.preco


def custo_total(qtd_jogos: int, tipo: TipoLoteria | str, qtd_dezenas: int) -> float | None:
    preco = preco_aposta(tipo, qtd_dezenas)
    if preco is None:
        return None
    return qtd_jogos * preco

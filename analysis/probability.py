from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from analysis.loterias import TipoLoteria, obter_config
from utils.formatters import formatar_percentual, formatar_razao

# quantas faixas abaixo do prêmio máximo a calculadora mostra
JANELA_FAIXAS = 6

SUPER_SETE_COLUNAS = 7
SUPER_SETE_SIMBOLOS = 10
SUPER_SETE_MAX_POR_COLUNA = 3
SUPER_SETE_MIN_ACERTOS = 3


@dataclass(frozen=True)
class FaixaPremio:
    min_acertos: int
    sorteados: int


# Faixas oficiais da Caixa (mínimo de acertos premiado / dezenas sorteadas)
FAIXAS_PREMIO: dict[TipoLoteria, FaixaPremio] = {
    TipoLoteria.MEGA_SENA: FaixaPremio(4, 6),
    TipoLoteria.LOTOFACIL: FaixaPremio(11, 15),
    TipoLoteria.QUINA: FaixaPremio(2, 5),
    TipoLoteria.LOTOMANIA: FaixaPremio(15, 20),  # também premia 0 acertos
    TipoLoteria.TIMEMANIA: FaixaPremio(3, 7),
    TipoLoteria.DUPLA_SENA: FaixaPremio(3, 6),
    TipoLoteria.DIA_DE_SORTE: FaixaPremio(4, 7),
    TipoLoteria.SUPER_SETE: FaixaPremio(3, 7),
    TipoLoteria.MAIS_MILIONARIA: FaixaPremio(2, 6),
}

ROTULOS_PREMIO_MAXIMO: dict[TipoLoteria, str] = {
    TipoLoteria.MEGA_SENA: "Sena",
    TipoLoteria.LOTOFACIL: "15 acertos",
    TipoLoteria.QUINA: "Quina",
    TipoLoteria.LOTOMANIA: "20 acertos",
    TipoLoteria.TIMEMANIA: "7 acertos",
    TipoLoteria.DUPLA_SENA: "Sena",
    TipoLoteria.DIA_DE_SORTE: "7 acertos",
    TipoLoteria.SUPER_SETE: "7 acertos",
    TipoLoteria.MAIS_MILIONARIA: "6 acertos",
}

LOTERIAS_PREMIAM_ZERO = {TipoLoteria.LOTOMANIA}


@dataclass
class FaixaOdds:
    acertos: int
    probabilidade: float
    razao: str


@dataclass
class ResumoProbabilidades:
    tipo: TipoLoteria
    qtd_apostados: int
    faixas: list[FaixaOdds] = field(default_factory=list)
    probabilidade_total: float = 0.0
    rotulo_premio_maximo: str = ""


def combinacoes(n: int, k: int) -> int:
    """
    C(n, k) por acumulação multiplicativa em inteiros.

    A cada passo resultado * (n - i) é divisível por (i + 1), então a
    divisão inteira é exata e não há arredondamento.
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    k = min(k, n - k)
    resultado = 1
    for i in range(k):
        resultado = resultado * (n - i) // (i + 1)
    return resultado


def _faixa(acertos: int, prob: float) -> FaixaOdds:
    return FaixaOdds(acertos=acertos, probabilidade=prob, razao=formatar_razao(prob))


def _odds_hipergeometrica(
    tamanho_universo: int, qtd_sorteados: int, qtd_apostados: int, menor_acerto: int
) -> list[FaixaOdds]:
    total = combinacoes(tamanho_universo, qtd_apostados)
    if total <= 0:
        return []

    faixas: list[FaixaOdds] = []
    for acertos in range(qtd_sorteados, menor_acerto - 1, -1):
        formas_acertar = combinacoes(qtd_sorteados, acertos)
        formas_errar = combinacoes(tamanho_universo - qtd_sorteados, qtd_apostados - acertos)
        favoraveis = formas_acertar * formas_errar
        if favoraveis <= 0:
            continue
        faixas.append(_faixa(acertos, favoraveis / total))
    return faixas


def calcular_odds(tamanho_universo: int, qtd_sorteados: int, qtd_apostados: int) -> list[FaixaOdds]:
    """
    Odds padrão (hipergeométrica) das faixas próximas ao prêmio máximo,
    em ordem decrescente de acertos.

    Não valida qtd_apostados: entradas fora da faixa da loteria devolvem
    faixas vazias em vez de erro.
    """
    menor = max(0, qtd_sorteados - JANELA_FAIXAS)
    return _odds_hipergeometrica(tamanho_universo, qtd_sorteados, qtd_apostados, menor)


def distribuicao_completa(tamanho_universo: int, qtd_sorteados: int, qtd_apostados: int) -> list[FaixaOdds]:
    # todas as faixas de acertos, de qtd_sorteados até 0
    return _odds_hipergeometrica(tamanho_universo, qtd_sorteados, qtd_apostados, 0)


def calcular_odds_super_sete(qtd_apostados: int) -> list[FaixaOdds]:
    """
    Super Sete: 7 colunas independentes com 10 símbolos cada.

    As dezenas por coluna são estimadas dividindo o total apostado por 7
    (máximo 3, mínimo 1). É uma aproximação, não a regra oficial de
    combinação do jogo.
    """
    por_coluna = min(qtd_apostados // SUPER_SETE_COLUNAS, SUPER_SETE_MAX_POR_COLUNA) or 1
    p_acerto = por_coluna / SUPER_SETE_SIMBOLOS
    p_erro = 1.0 - p_acerto

    faixas: list[FaixaOdds] = []
    for acertos in range(SUPER_SETE_COLUNAS, SUPER_SETE_MIN_ACERTOS - 1, -1):
        formas = combinacoes(SUPER_SETE_COLUNAS, acertos)
        prob = formas * (p_acerto ** acertos) * (p_erro ** (SUPER_SETE_COLUNAS - acertos))
        faixas.append(_faixa(acertos, prob))
    return faixas


def odds_para_loteria(tipo: TipoLoteria | str, qtd_apostados: int) -> list[FaixaOdds]:
    config = obter_config(tipo)
    if config.tipo == TipoLoteria.SUPER_SETE:
        return calcular_odds_super_sete(qtd_apostados)
    premio = FAIXAS_PREMIO[config.tipo]
    return calcular_odds(config.tamanho_universo, premio.sorteados, qtd_apostados)


def filtrar_faixas_premio(faixas: list[FaixaOdds], tipo: TipoLoteria | str) -> list[FaixaOdds]:
    tipo = obter_config(tipo).tipo
    premio = FAIXAS_PREMIO.get(tipo)
    if premio is None:
        return list(faixas)
    premia_zero = tipo in LOTERIAS_PREMIAM_ZERO
    return [
        f for f in faixas
        if f.acertos >= premio.min_acertos or (premia_zero and f.acertos == 0)
    ]


def probabilidade_total(faixas: list[FaixaOdds]) -> float:
    """
    Chance de ganhar qualquer prêmio: soma das faixas premiadas.
    """
    return float(sum(f.probabilidade for f in faixas))


def resumo_probabilidades(tipo: TipoLoteria | str, qtd_apostados: int) -> ResumoProbabilidades:
    config = obter_config(tipo)
    faixas = filtrar_faixas_premio(odds_para_loteria(config.tipo, qtd_apostados), config.tipo)
    return ResumoProbabilidades(
        tipo=config.tipo,
        qtd_apostados=qtd_apostados,
        faixas=faixas,
        probabilidade_total=probabilidade_total(faixas),
        rotulo_premio_maximo=ROTULOS_PREMIO_MAXIMO[config.tipo],
    )


def soma_distribuicao(tamanho_universo: int, qtd_sorteados: int, qtd_apostados: int) -> float:
    probs = np.array(
        [f.probabilidade for f in distribuicao_completa(tamanho_universo, qtd_sorteados, qtd_apostados)],
        dtype=float,
    )
    return float(probs.sum())


def odds_dataframe(faixas: list[FaixaOdds]) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"acertos": f.acertos, "probabilidade": f.probabilidade, "razao": f.razao} for f in faixas],
        columns=["acertos", "probabilidade", "razao"],
    )
    df["percentual"] = df["probabilidade"].map(formatar_percentual)
    return df[["acertos", "probabilidade", "percentual", "razao"]]

import math

import pytest

from analysis.loterias import LOTERIAS, TipoLoteria
from analysis.probability import (
    FaixaOdds,
    calcular_odds,
    calcular_odds_super_sete,
    combinacoes,
    distribuicao_completa,
    filtrar_faixas_premio,
    odds_dataframe,
    odds_para_loteria,
    probabilidade_total,
    resumo_probabilidades,
    soma_distribuicao,
)


def test_combinacoes_mega_sena():
    assert combinacoes(60, 6) == 50063860


@pytest.mark.parametrize("n", range(0, 40))
def test_combinacoes_simetria_e_bordas(n):
    assert combinacoes(n, 0) == 1
    assert combinacoes(n, n) == 1
    for k in range(n + 1):
        assert combinacoes(n, k) == combinacoes(n, n - k)


@pytest.mark.parametrize("n,k", [(5, -1), (5, 6), (0, 1), (10, -3)])
def test_combinacoes_impossivel_retorna_zero(n, k):
    assert combinacoes(n, k) == 0


def test_combinacoes_exata_para_n_grande():
    assert combinacoes(100, 50) == math.comb(100, 50)
    assert combinacoes(100, 20) == math.comb(100, 20)


def test_odds_sena_com_seis_dezenas():
    faixas = calcular_odds(60, 6, 6)
    assert faixas[0].acertos == 6
    assert faixas[0].probabilidade == 1 / 50063860
    assert faixas[0].razao == "1 : 50.1M"


def test_odds_em_ordem_decrescente_e_janela_limitada():
    faixas = calcular_odds(25, 15, 15)
    acertos = [f.acertos for f in faixas]
    assert acertos == sorted(acertos, reverse=True)
    assert acertos[0] == 15
    assert min(acertos) >= 15 - 6


def test_odds_omitem_faixas_impossiveis():
    # com 15 de 25 sorteados, apostar 15 garante pelo menos 5 acertos
    faixas = distribuicao_completa(25, 15, 15)
    assert min(f.acertos for f in faixas) == 5


def test_odds_apostando_mais_que_o_universo_nao_falha():
    assert calcular_odds(10, 6, 11) == []


@pytest.mark.parametrize(
    "universo,sorteados,apostados",
    [(60, 6, 6), (60, 6, 20), (25, 15, 15), (25, 15, 20), (80, 5, 15), (100, 20, 50), (31, 7, 7)],
)
def test_distribuicao_completa_soma_um(universo, sorteados, apostados):
    assert soma_distribuicao(universo, sorteados, apostados) == pytest.approx(1.0, abs=1e-12)


def test_super_sete_uma_dezena_por_coluna():
    faixas = calcular_odds_super_sete(7)
    assert [f.acertos for f in faixas] == [7, 6, 5, 4, 3]
    assert faixas[0].probabilidade == pytest.approx(1e-7)


def test_super_sete_limita_tres_por_coluna():
    faixas = calcular_odds_super_sete(21)
    assert faixas[0].probabilidade == pytest.approx(0.3 ** 7)
    # mais dezenas que 21 continua limitado a 3 por coluna
    assert calcular_odds_super_sete(28)[0].probabilidade == pytest.approx(0.3 ** 7)


def test_odds_para_loteria_usa_caso_de_colunas_no_super_sete():
    assert odds_para_loteria(TipoLoteria.SUPER_SETE, 7) == calcular_odds_super_sete(7)
    assert odds_para_loteria("mega_sena", 6) == calcular_odds(60, 6, 6)


def test_filtro_mega_sena_mantem_quadra_quina_sena():
    faixas = filtrar_faixas_premio(odds_para_loteria(TipoLoteria.MEGA_SENA, 6), TipoLoteria.MEGA_SENA)
    assert [f.acertos for f in faixas] == [6, 5, 4]


def test_filtro_lotomania_premia_zero_acertos():
    faixas = [FaixaOdds(20, 0.1, ""), FaixaOdds(14, 0.2, ""), FaixaOdds(0, 0.01, "")]
    assert [f.acertos for f in filtrar_faixas_premio(faixas, "lotomania")] == [20, 0]


def test_filtro_nao_premia_zero_nas_outras_loterias():
    faixas = [FaixaOdds(5, 0.1, ""), FaixaOdds(0, 0.5, "")]
    assert [f.acertos for f in filtrar_faixas_premio(faixas, TipoLoteria.QUINA)] == [5]


@pytest.mark.parametrize("config", LOTERIAS, ids=lambda c: c.tipo.value)
def test_chance_total_nunca_passa_de_um(config):
    for qtd in range(config.min, config.max + 1):
        resumo = resumo_probabilidades(config.tipo, qtd)
        assert 0 < resumo.probabilidade_total <= 1
        assert resumo.probabilidade_total == pytest.approx(probabilidade_total(resumo.faixas))


def test_resumo_traz_rotulo_do_premio_maximo():
    resumo = resumo_probabilidades("quina", 5)
    assert resumo.rotulo_premio_maximo == "Quina"
    assert resumo.faixas[0].acertos == 5


def test_odds_dataframe_colunas():
    df = odds_dataframe(calcular_odds(60, 6, 6))
    assert list(df.columns) == ["acertos", "probabilidade", "percentual", "razao"]
    assert df.iloc[0]["razao"] == "1 : 50.1M"

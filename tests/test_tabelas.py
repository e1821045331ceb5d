import pytest

from analysis.tabelas import (
    distribuicao_coincidencias,
    dupla_sena_frequencias,
    frequencia_itens,
    frequencia_posicional,
    ganhadores_por_uf,
    historico_mensal_dataframe,
    proximos_especiais,
    ranking_dataframe,
    top_numeros,
)


def _numero(numero, frequencia, atraso, score, status="NEUTRO"):
    return {
        "numero": numero,
        "loteria": "mega_sena",
        "estatisticas": {"frequencia": frequencia, "percentualAparicoes": 10.0, "atrasoAtual": atraso, "maiorAtraso": 40},
        "tendencia": {"status": status, "recomendacao": "", "scoreTendencia": score},
    }


RANKING = [
    _numero(10, 300, 2, 55.0),
    _numero(4, 280, 30, 81.5, "QUENTE"),
    _numero(53, 310, 1, 55.0),
]


def test_ranking_por_score_desempata_pelo_numero():
    df = ranking_dataframe(RANKING)
    assert list(df["numero"]) == [4, 10, 53]
    assert df.iloc[0]["status"] == "QUENTE"


def test_ranking_por_frequencia_e_atraso():
    assert list(ranking_dataframe(RANKING, "frequencia")["numero"]) == [53, 10, 4]
    assert list(ranking_dataframe(RANKING, "atraso")["numero"]) == [4, 10, 53]


def test_ranking_ordenacao_invalida():
    with pytest.raises(ValueError):
        ranking_dataframe(RANKING, "sorte")


def test_top_numeros_em_ordem_crescente():
    df = ranking_dataframe(RANKING, "frequencia")
    assert top_numeros(df, 2) == [10, 53]


def test_ranking_vazio():
    df = ranking_dataframe([])
    assert df.empty
    assert top_numeros(df) == []


def test_frequencia_posicional():
    df = frequencia_posicional(
        [
            {"numero": 5, "frequencia": 12, "percentual": 1.2},
            {"numero": 33, "frequencia": 20, "percentual": 2.0},
        ]
    )
    assert list(df["numero"]) == [33, 5]


def test_dupla_sena_chaves_em_texto():
    df = dupla_sena_frequencias(
        {"frequenciaPrimeiroSorteio": {"1": 10, "7": 3}, "frequenciaSegundoSorteio": {"7": 5, "12": 2}}
    )
    assert list(df["numero"]) == [1, 7, 12]
    assert list(df["primeiro_sorteio"]) == [10, 3, 0]
    assert list(df["segundo_sorteio"]) == [0, 5, 2]
    assert list(df["diferenca"]) == [10, -2, -2]


def test_distribuicao_coincidencias():
    df = distribuicao_coincidencias({"distribuicaoCoincidencias": {"2": 5, "0": 40, "1": 30}})
    assert list(df["coincidencias"]) == [0, 1, 2]
    assert list(df["concursos"]) == [40, 30, 5]


def test_ganhadores_por_uf_com_participacao():
    df = ganhadores_por_uf(
        {
            "totalGanhadores": 8,
            "porEstado": [
                {"uf": "RJ", "totalGanhadores": 2, "totalConcursos": 2},
                {"uf": "SP", "totalGanhadores": 6, "totalConcursos": 5},
            ],
        }
    )
    assert list(df["uf"]) == ["SP", "RJ"]
    assert list(df["percentual"]) == [75.0, 25.0]


def test_ganhadores_por_uf_sem_dados():
    df = ganhadores_por_uf({"totalGanhadores": 0, "porEstado": []})
    assert df.empty
    assert "percentual" in df.columns


def test_frequencia_de_times():
    df = frequencia_itens(
        [
            {"nome": "SANTOS/SP", "frequencia": 30, "percentual": 3.0, "atrasoAtual": 4, "ultimaAparicao": None},
            {"nome": "FLAMENGO/RJ", "frequencia": 41, "percentual": 4.1, "atrasoAtual": 0, "ultimaAparicao": "2024-05-01"},
        ]
    )
    assert list(df["nome"]) == ["FLAMENGO/RJ", "SANTOS/SP"]
    assert df.iloc[1]["atraso"] == 4


def test_historico_mensal_em_ordem_cronologica():
    df = historico_mensal_dataframe(
        [
            {"ano": 2024, "mes": 2, "maisFrequentes": [3, 1], "menosFrequentes": [50]},
            {"ano": 2023, "mes": 12, "maisFrequentes": [7], "menosFrequentes": []},
        ]
    )
    assert list(df["mes_ano"]) == ["12/2023", "02/2024"]
    assert df.iloc[1]["mais_frequentes"] == "03 - 01"


def test_proximos_especiais_pelo_que_falta():
    df = proximos_especiais(
        {
            "proximosConcursosEspeciais": [
                {"tipoLoteria": "mega_sena", "nomeLoteria": "Mega-Sena", "nomeEspecial": "Mega da Virada",
                 "numeroConcursoFinalEspecial": 2810, "concursosFaltando": 40, "valorAcumulado": 1.0e8},
                {"tipoLoteria": "quina", "nomeLoteria": "Quina", "nomeEspecial": "Quina de São João",
                 "numeroConcursoFinalEspecial": 6490, "concursosFaltando": 3, "valorAcumulado": None},
            ]
        }
    )
    assert list(df["loteria"]) == ["Quina", "Mega-Sena"]
    assert df.iloc[0]["faltam"] == 3
